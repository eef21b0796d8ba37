"""
Booking service
Booking requests from the public form and the guest portal, plus the
back-office views built on top of them (guest grouping, calendar, stats)
"""
import calendar
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from resort.exceptions import ValidationError, NotFoundError
from resort.models.entities import Booking, BookingStatus, Guest, utcnow
from resort.models.schemas import BookingCreate, GuestBookingCreate
from resort.notification.booking_email import send_booking_notification
from resort.services.demo_data import demo_id

logger = logging.getLogger(__name__)

# Statuses that still count as an upcoming stay
OPEN_STATUSES = {BookingStatus.PENDING, BookingStatus.CONFIRMED}


def validate_stay_dates(check_in: date, check_out: date, today: Optional[date] = None) -> None:
    """Reject stays in the past and stays that end before they start"""
    today = today or date.today()
    if check_in < today:
        raise ValidationError("Check-in date cannot be in the past")
    if check_out < today:
        raise ValidationError("Check-out date cannot be in the past")
    if check_out <= check_in:
        raise ValidationError("Check-out date must be after check-in date")


class BookingService:
    """Booking service"""

    def __init__(self, db: Session, notifier: Callable[[Booking], bool] = None):
        self.db = db
        # injectable so tests do not talk to SMTP
        self._notify = notifier or send_booking_notification

    # ============== Create ==============

    def create_booking(self, data: BookingCreate, today: Optional[date] = None) -> Tuple[str, Booking]:
        """Public booking form; returns (booking id, booking)"""
        validate_stay_dates(data.check_in, data.check_out, today)

        booking = Booking(
            name=data.name,
            email=data.email,
            phone=data.phone or "",
            check_in=data.check_in,
            check_out=data.check_out,
            guests=data.guests,
            room_type=data.room_type or "Not specified",
            room_id=data.room_id,
            message=data.message or "",
            status=BookingStatus.PENDING,
        )
        return self._save_and_notify(booking), booking

    def create_guest_booking(self, guest: Guest, data: GuestBookingCreate,
                             today: Optional[date] = None) -> Tuple[str, Booking]:
        """Guest portal booking; contact details default to the guest's account"""
        validate_stay_dates(data.check_in, data.check_out, today)

        booking = Booking(
            guest_id=guest.id,
            name=data.guest_name or guest.full_name,
            email=data.guest_email or guest.email,
            phone=data.guest_phone or guest.phone or "",
            check_in=data.check_in,
            check_out=data.check_out,
            guests=data.guests,
            room_type=data.room_type or "Not specified",
            room_id=data.room_id,
            message=data.message or "",
            status=BookingStatus.PENDING,
        )
        return self._save_and_notify(booking), booking

    def _save_and_notify(self, booking: Booking) -> str:
        logger.info(f"Processing booking for: {booking.email}")
        try:
            self.db.add(booking)
            self.db.commit()
            self.db.refresh(booking)
            booking_id = str(booking.id)
            logger.info(f"Booking saved: {booking_id}")
        except SQLAlchemyError as e:
            # The request is still mailed to the resort, so it is not lost
            self.db.rollback()
            booking_id = demo_id()
            logger.warning(f"Database not available, proceeding with email-only mode: {e}")

        self._notify(booking)
        return booking_id

    # ============== Read ==============

    def get_bookings(self, status: Optional[BookingStatus] = None) -> List[Booking]:
        """All bookings, newest first"""
        query = self.db.query(Booking)
        if status:
            query = query.filter(Booking.status == status)
        return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    def get_guest_bookings(self, guest_id: int) -> List[Booking]:
        return self.db.query(Booking).filter(
            Booking.guest_id == guest_id
        ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    # ============== Update / Delete ==============

    def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")

        booking.status = status
        booking.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(booking)
        logger.info(f"Booking {booking_id} set to {status.value}")
        return booking

    def delete_booking(self, booking_id: int) -> None:
        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        self.db.delete(booking)
        self.db.commit()


# ============== Back-office views ==============
# These work on anything with booking attributes: ORM rows or response models.

@dataclass
class GuestGroup:
    email: str
    name: str
    phone: str
    total_bookings: int
    last_visit: date
    upcoming: bool
    bookings: list


def _status_of(booking) -> BookingStatus:
    return BookingStatus(booking.status)


def group_bookings_by_email(bookings: Iterable) -> List[GuestGroup]:
    """One entry per guest email, in order of first appearance"""
    groups = {}
    for booking in bookings:
        is_open = _status_of(booking) in OPEN_STATUSES
        group = groups.get(booking.email)
        if group is None:
            groups[booking.email] = GuestGroup(
                email=booking.email,
                name=booking.name,
                phone=booking.phone or "",
                total_bookings=1,
                last_visit=booking.check_in,
                upcoming=is_open,
                bookings=[booking],
            )
            continue
        group.bookings.append(booking)
        group.total_bookings += 1
        if booking.check_in > group.last_visit:
            group.last_visit = booking.check_in
        group.upcoming = group.upcoming or is_open
    return list(groups.values())


def bookings_covering(bookings: Iterable, day: date) -> list:
    """Bookings whose stay includes the day (check-in and check-out days inclusive)"""
    return [b for b in bookings if b.check_in <= day <= b.check_out]


def day_status(bookings: Iterable, day: date) -> str:
    """available / booked (all confirmed) / reserved (all pending) / mixed"""
    covering = bookings_covering(bookings, day)
    if not covering:
        return "available"
    statuses = {_status_of(b) for b in covering}
    if statuses == {BookingStatus.CONFIRMED}:
        return "booked"
    if statuses == {BookingStatus.PENDING}:
        return "reserved"
    return "mixed"


def month_calendar(bookings: Iterable, year: int, month: int) -> List[dict]:
    bookings = list(bookings)
    _, days_in_month = calendar.monthrange(year, month)
    result = []
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        result.append({
            "date": day,
            "status": day_status(bookings, day),
            "booking_count": len(bookings_covering(bookings, day)),
        })
    return result


def booking_stats(bookings: Iterable, today: Optional[date] = None) -> dict:
    """Dashboard counters"""
    today = today or date.today()
    bookings = list(bookings)
    counts = {status: 0 for status in BookingStatus}
    checked_in = 0
    for b in bookings:
        status = _status_of(b)
        counts[status] += 1
        if status == BookingStatus.CONFIRMED and b.check_in <= today:
            checked_in += 1
    return {
        "total": len(bookings),
        "pending": counts[BookingStatus.PENDING],
        "confirmed": counts[BookingStatus.CONFIRMED],
        "completed": counts[BookingStatus.COMPLETED],
        "cancelled": counts[BookingStatus.CANCELLED],
        "checked_in": checked_in,
    }
