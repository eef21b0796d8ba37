"""
Booking API tests
Covers /api/bookings, /api/admin/bookings and /api/guest/bookings
"""
from datetime import date, timedelta
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from resort.models.entities import Booking, BookingStatus


def _form(check_in, check_out, **overrides):
    body = {
        "name": "  Maria Santos  ",
        "email": "maria@example.com",
        "phone": "09123456789",
        "checkIn": check_in.isoformat(),
        "checkOut": check_out.isoformat(),
        "guests": 4,
        "roomType": "Beachfront Room",
        "message": "Early check-in please",
    }
    body.update(overrides)
    return body


class TestPublicBookingForm:
    """Public booking form"""

    def test_create_booking(self, client: TestClient, db_session, future_stay, sent_emails):
        response = client.post("/api/bookings", json=_form(*future_stay))

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert "bookingId" in data

        booking = db_session.query(Booking).filter(Booking.id == int(data["bookingId"])).first()
        assert booking.name == "Maria Santos"
        assert booking.status == BookingStatus.PENDING
        assert sent_emails == [booking]

    def test_optional_fields_default(self, client: TestClient, db_session, future_stay):
        body = _form(*future_stay)
        del body["phone"], body["roomType"], body["message"]
        response = client.post("/api/bookings", json=body)

        assert response.status_code == 201
        booking = db_session.query(Booking).first()
        assert booking.phone == ""
        assert booking.message == ""
        assert booking.room_type == "Not specified"

    def test_missing_required_field(self, client: TestClient, future_stay):
        body = _form(*future_stay)
        del body["email"]
        response = client.post("/api/bookings", json=body)

        assert response.status_code == 400

    def test_check_out_before_check_in(self, client: TestClient, future_stay):
        check_in, _ = future_stay
        response = client.post("/api/bookings", json=_form(check_in, check_in - timedelta(days=1)))

        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"

    def test_same_day_check_out(self, client: TestClient, future_stay):
        check_in, _ = future_stay
        response = client.post("/api/bookings", json=_form(check_in, check_in))

        assert response.status_code == 400

    def test_check_in_in_the_past(self, client: TestClient):
        yesterday = date.today() - timedelta(days=1)
        response = client.post("/api/bookings", json=_form(yesterday, date.today() + timedelta(days=1)))

        assert response.status_code == 400
        assert "past" in response.json()["detail"]

    def test_list_bookings_by_status(self, client: TestClient, booking_factory):
        booking_factory(email="a@example.com")
        booking_factory(email="b@example.com", status=BookingStatus.CONFIRMED)

        response = client.get("/api/bookings", params={"status": "confirmed"})

        assert response.status_code == 200
        bookings = response.json()["bookings"]
        assert [b["email"] for b in bookings] == ["b@example.com"]


class TestAdminBookings:
    """Back-office booking management"""

    def test_requires_session(self, client: TestClient):
        response = client.get("/api/admin/bookings")
        assert response.status_code == 401

    def test_list_newest_first(self, admin_client: TestClient, booking_factory):
        booking_factory(email="first@example.com")
        booking_factory(email="second@example.com")

        response = admin_client.get("/api/admin/bookings")

        assert response.status_code == 200
        data = response.json()
        assert data["connected"] is True
        assert [b["email"] for b in data["bookings"]] == ["second@example.com", "first@example.com"]
        assert "checkIn" in data["bookings"][0]

    def test_staff_can_list(self, staff_client: TestClient, sample_booking):
        response = staff_client.get("/api/admin/bookings")

        assert response.status_code == 200
        assert len(response.json()["bookings"]) == 1

    def test_update_status(self, admin_client: TestClient, sample_booking):
        response = admin_client.patch("/api/admin/bookings", json={
            "id": sample_booking.id, "status": "confirmed"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "confirmed"
        assert data["updatedAt"] is not None

    def test_update_status_invalid_value(self, admin_client: TestClient, sample_booking):
        response = admin_client.patch("/api/admin/bookings", json={
            "id": sample_booking.id, "status": "checked-in"
        })
        assert response.status_code == 400

    def test_update_status_unknown_booking(self, admin_client: TestClient):
        response = admin_client.patch("/api/admin/bookings", json={"id": 9999, "status": "confirmed"})
        assert response.status_code == 404

    def test_staff_without_permission_cannot_update(self, client: TestClient, staff_factory,
                                                    login_staff, sample_booking):
        housekeeper = staff_factory(username="keeper", role="housekeeper", department="Housekeeping")
        login_staff(housekeeper)

        response = client.patch("/api/admin/bookings", json={
            "id": sample_booking.id, "status": "confirmed"
        })
        assert response.status_code == 403

    def test_staff_with_permission_can_update(self, staff_client: TestClient, sample_booking):
        response = staff_client.patch("/api/admin/bookings", json={
            "id": sample_booking.id, "status": "cancelled"
        })
        assert response.status_code == 200

    def test_delete_booking(self, admin_client: TestClient, sample_booking):
        response = admin_client.delete("/api/admin/bookings", params={"id": sample_booking.id})

        assert response.status_code == 200
        assert admin_client.get("/api/admin/bookings").json()["bookings"] == []

    def test_delete_without_id(self, admin_client: TestClient):
        assert admin_client.delete("/api/admin/bookings").status_code == 400

    def test_delete_requires_admin(self, staff_client: TestClient, sample_booking):
        response = staff_client.delete("/api/admin/bookings", params={"id": sample_booking.id})
        assert response.status_code == 401


class TestBookingViews:
    """Guest grouping, calendar and stats"""

    def test_guests_grouped_by_email(self, admin_client: TestClient, booking_factory):
        today = date.today()
        booking_factory(email="maria@example.com", check_in=today + timedelta(days=3),
                        status=BookingStatus.COMPLETED)
        booking_factory(email="maria@example.com", check_in=today + timedelta(days=10))
        booking_factory(email="john@example.com", name="John", status=BookingStatus.CANCELLED)

        response = admin_client.get("/api/admin/bookings/guests")

        assert response.status_code == 200
        guests = {g["email"]: g for g in response.json()}
        assert guests["maria@example.com"]["totalBookings"] == 2
        assert guests["maria@example.com"]["lastVisit"] == (today + timedelta(days=10)).isoformat()
        assert guests["maria@example.com"]["upcoming"] is True
        assert guests["john@example.com"]["upcoming"] is False

    def test_calendar(self, admin_client: TestClient, booking_factory):
        booking_factory(check_in=date(2030, 5, 10), nights=2, status=BookingStatus.CONFIRMED)
        booking_factory(check_in=date(2030, 5, 12), nights=1)

        response = admin_client.get("/api/admin/bookings/calendar", params={"year": 2030, "month": 5})

        assert response.status_code == 200
        days = {d["date"]: d for d in response.json()["days"]}
        assert len(days) == 31
        assert days["2030-05-09"]["status"] == "available"
        assert days["2030-05-10"]["status"] == "booked"
        assert days["2030-05-12"]["status"] == "mixed"
        assert days["2030-05-12"]["bookingCount"] == 2
        assert days["2030-05-13"]["status"] == "reserved"

    def test_calendar_invalid_month(self, admin_client: TestClient):
        response = admin_client.get("/api/admin/bookings/calendar", params={"year": 2030, "month": 13})
        assert response.status_code == 400

    def test_stats(self, admin_client: TestClient, booking_factory):
        booking_factory(check_in=date.today(), status=BookingStatus.CONFIRMED)
        booking_factory(status=BookingStatus.CONFIRMED)
        booking_factory()

        response = admin_client.get("/api/admin/bookings/stats")

        assert response.status_code == 200
        stats = response.json()
        assert stats["total"] == 3
        assert stats["pending"] == 1
        assert stats["confirmed"] == 2
        assert stats["checkedIn"] == 1

    def test_views_fall_back_to_demo_bookings(self, admin_client: TestClient):
        down = OperationalError("SELECT", {}, Exception("down"))
        with patch("resort.routers.bookings.BookingService.get_bookings", side_effect=down):
            guests = admin_client.get("/api/admin/bookings/guests")
            calendar = admin_client.get("/api/admin/bookings/calendar", params={"year": 2026, "month": 2})
            stats = admin_client.get("/api/admin/bookings/stats")

        assert guests.status_code == 200
        assert [g["email"] for g in guests.json()] == [
            "maria@example.com", "john@example.com", "group@example.com"
        ]
        days = {d["date"]: d["status"] for d in calendar.json()["days"]}
        assert days["2026-02-15"] == "reserved"
        assert days["2026-02-21"] == "booked"
        assert days["2026-02-19"] == "available"
        assert stats.json()["total"] == 3
        assert stats.json()["pending"] == 2


class TestGuestPortalBookings:
    """Bookings made from the guest portal"""

    def test_defaults_to_profile(self, guest_client: TestClient, db_session, sample_guest, future_stay):
        check_in, check_out = future_stay
        response = guest_client.post("/api/guest/bookings", json={
            "checkIn": check_in.isoformat(),
            "checkOut": check_out.isoformat(),
            "guests": 2,
        })

        assert response.status_code == 201
        booking = db_session.query(Booking).first()
        assert booking.guest_id == sample_guest.id
        assert booking.name == "Ana Reyes"
        assert booking.email == "ana@example.com"
        assert booking.phone == "09171234567"

    def test_requires_guest_session(self, client: TestClient, future_stay):
        check_in, check_out = future_stay
        response = client.post("/api/guest/bookings", json={
            "checkIn": check_in.isoformat(), "checkOut": check_out.isoformat(), "guests": 2
        })
        assert response.status_code == 401

    def test_lists_only_own_bookings(self, guest_client: TestClient, sample_guest, booking_factory):
        booking_factory(email="ana@example.com", guest_id=sample_guest.id)
        booking_factory(email="someone@example.com")

        response = guest_client.get("/api/guest/bookings")

        assert response.status_code == 200
        bookings = response.json()["bookings"]
        assert len(bookings) == 1
        assert bookings[0]["guestId"] == sample_guest.id
