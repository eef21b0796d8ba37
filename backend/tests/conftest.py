"""
Pytest configuration and shared fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import date, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from resort.database import Base, get_db
from resort.models.entities import (
    Booking, BookingStatus, Room, RoomStatus, Testimonial, GalleryImage, Guest, Staff
)
from resort.routers.bookings import get_booking_notifier
from resort.security.auth import (
    ADMIN_COOKIE, STAFF_COOKIE, GUEST_COOKIE,
    get_password_hash, create_session_token, new_token_id,
    admin_session_length, staff_session_length, guest_session_length
)
from resort.main import app


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Database session"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def sent_emails():
    """Bookings that would have been mailed to the resort"""
    return []


@pytest.fixture(scope="function")
def client(db_session, sent_emails):
    """Test client bound to the in-memory database"""
    def override_get_db():
        yield db_session

    def override_notifier():
        def record(booking):
            sent_emails.append(booking)
            return True
        return record

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_booking_notifier] = override_notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Session fixtures ==============

def make_staff(db, username="frontdesk", role="front_desk_agent", password="secret123",
               is_active=True, department="Front Desk"):
    staff = Staff(
        username=username,
        email=f"{username}@resort.test",
        password_hash=get_password_hash(password),
        full_name=username.title(),
        department=department,
        role=role,
        is_active=is_active,
    )
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


def staff_token(db, staff):
    """Open a session for a staff row the way a login does"""
    staff.token_id = new_token_id()
    db.commit()
    return create_session_token(str(staff.id), "staff", staff_session_length(), token_id=staff.token_id)


@pytest.fixture
def admin_client(client):
    """Client holding an admin session"""
    token = create_session_token("admin", "admin", admin_session_length())
    client.cookies.set(ADMIN_COOKIE, token)
    return client


@pytest.fixture
def sample_staff(db_session):
    """Front desk agent: may manage bookings and guests"""
    return make_staff(db_session)


@pytest.fixture
def staff_client(client, db_session, sample_staff):
    """Client holding a front desk agent session"""
    client.cookies.set(STAFF_COOKIE, staff_token(db_session, sample_staff))
    return client


@pytest.fixture
def sample_guest(db_session):
    guest = Guest(
        email="ana@example.com",
        password_hash=get_password_hash("guestpass"),
        full_name="Ana Reyes",
        phone="09171234567",
        address="Manila",
        is_active=True,
    )
    db_session.add(guest)
    db_session.commit()
    db_session.refresh(guest)
    return guest


@pytest.fixture
def guest_client(client, db_session, sample_guest):
    """Client holding a guest portal session"""
    sample_guest.token_id = new_token_id()
    db_session.commit()
    token = create_session_token(str(sample_guest.id), "guest", guest_session_length(),
                                 token_id=sample_guest.token_id)
    client.cookies.set(GUEST_COOKIE, token)
    return client


# ============== Entity fixtures ==============

@pytest.fixture
def future_stay():
    """(check_in, check_out) a week from now"""
    check_in = date.today() + timedelta(days=7)
    return check_in, check_in + timedelta(days=2)


def make_booking(db, name="Maria Santos", email="maria@example.com", check_in=None,
                 nights=2, status=BookingStatus.PENDING, guest_id=None):
    check_in = check_in or date.today() + timedelta(days=7)
    booking = Booking(
        guest_id=guest_id,
        name=name,
        email=email,
        phone="09123456789",
        check_in=check_in,
        check_out=check_in + timedelta(days=nights),
        guests=2,
        room_type="Beachfront Room",
        message="",
        status=status,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


@pytest.fixture
def sample_booking(db_session):
    return make_booking(db_session)


@pytest.fixture
def sample_room(db_session):
    room = Room(
        name="Beachfront Room",
        type="room",
        capacity="up to 4 pax",
        image="/images/piel1.jpg",
        images=["/images/piel1.jpg"],
        price="₱3,500",
        period="/night",
        inclusions=[{"icon": "Wifi", "text": "Free WiFi"}],
        popular=True,
        features=["Table Cottage"],
        description="Direct beach access",
        order=1,
        status=RoomStatus.AVAILABLE,
    )
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room


@pytest.fixture
def sample_testimonial(db_session):
    testimonial = Testimonial(
        name="Sarah Martinez", role="Family Vacation", rating=5,
        text="Amazing stay!", stay_date="December 2025", order=1
    )
    db_session.add(testimonial)
    db_session.commit()
    db_session.refresh(testimonial)
    return testimonial


@pytest.fixture
def sample_image(db_session):
    image = GalleryImage(url="/images/piel1.jpg", title="Beachfront", category="Rooms",
                         col_span="col-span-2", order=1)
    db_session.add(image)
    db_session.commit()
    db_session.refresh(image)
    return image


@pytest.fixture
def booking_factory(db_session):
    """Create bookings: booking_factory(email=..., check_in=..., status=...)"""
    def factory(**kwargs):
        return make_booking(db_session, **kwargs)
    return factory


@pytest.fixture
def staff_factory(db_session):
    """Create staff members: staff_factory(username=..., role=...)"""
    def factory(**kwargs):
        return make_staff(db_session, **kwargs)
    return factory


@pytest.fixture
def login_staff(client, db_session):
    """Give the client a session for the given staff row: login_staff(staff)"""
    def login(staff):
        client.cookies.set(STAFF_COOKIE, staff_token(db_session, staff))
        return client
    return login
