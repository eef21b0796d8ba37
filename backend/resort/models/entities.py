"""
Persisted entities
Bookings, rooms, site content, guest and staff accounts, attendance records
"""
from datetime import datetime, UTC
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Float, DateTime, Date,
    Text, Enum as SQLEnum, Boolean, JSON, UniqueConstraint
)
from resort.database import Base


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


# ============== Enums ==============

class BookingStatus(str, Enum):
    """Booking status"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RoomStatus(str, Enum):
    """Room availability"""
    AVAILABLE = "available"
    BOOKED = "booked"


class RoomKind(str, Enum):
    ROOM = "room"
    COTTAGE = "cottage"


class AttendanceStatus(str, Enum):
    """Daily attendance status"""
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    ON_LEAVE = "on-leave"


# ============== Entities ==============

class Booking(Base):
    """
    Booking request
    Guests may book anonymously (public form) or from their portal (guest_id set).
    The room is referenced informally through room_type and room_id.
    """
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, index=True)                   # portal bookings only
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, index=True)
    phone = Column(String(30), default="")
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    guests = Column(Integer, nullable=False)
    room_type = Column(String(100), default="Not specified")
    room_id = Column(Integer)
    message = Column(Text, default="")
    status = Column(SQLEnum(BookingStatus, values_callable=lambda e: [m.value for m in e]),
                    default=BookingStatus.PENDING, nullable=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Room(Base):
    """
    Accommodation shown on the marketing site
    price and capacity are display strings ("₱3,500", "up to 4 pax")
    """
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    type = Column(SQLEnum(RoomKind, values_callable=lambda e: [m.value for m in e]),
                  default=RoomKind.ROOM)
    capacity = Column(String(50), default="")
    image = Column(String(255), default="")
    images = Column(JSON, default=list)
    price = Column(String(30), default="")
    period = Column(String(20), default="/night")
    inclusions = Column(JSON, default=list)                  # [{"icon": ..., "text": ...}]
    popular = Column(Boolean, default=False)
    features = Column(JSON, default=list)
    description = Column(Text, default="")
    order = Column(Integer, default=0)
    status = Column(SQLEnum(RoomStatus, values_callable=lambda e: [m.value for m in e]),
                    default=RoomStatus.AVAILABLE)
    current_booking_id = Column(Integer)
    current_guest_name = Column(String(100))
    current_check_in = Column(Date)
    current_check_out = Column(Date)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Testimonial(Base):
    """Guest review shown on the home page"""
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    role = Column(String(100), default="")                   # e.g. "Family Vacation"
    avatar = Column(String(255), default="/placeholder-user.jpg")
    rating = Column(Integer, default=5)
    text = Column(Text, nullable=False)
    stay_date = Column(String(50), default="")
    order = Column(Integer, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class GalleryImage(Base):
    """Gallery picture"""
    __tablename__ = "gallery_images"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String(255), nullable=False)
    title = Column(String(100), default="")
    category = Column(String(50), default="")
    col_span = Column(String(50), default="col-span-1")
    order = Column(Integer, default=0)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Guest(Base):
    """Guest portal account"""
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    phone = Column(String(30), nullable=False)
    address = Column(String(255), default="")
    is_active = Column(Boolean, default=True)
    token_id = Column(String(64))                            # id of the current session token
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Staff(Base):
    """Staff portal account, created by the admin"""
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(120), nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    department = Column(String(50), default="General")
    role = Column(String(50), default="staff")
    phone = Column(String(30), default="")
    is_active = Column(Boolean, default=True)
    token_id = Column(String(64))
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Attendance(Base):
    """
    One record per staff member per day
    staff_id is a string so the demo-mode staff member can clock in too
    """
    __tablename__ = "attendance"
    __table_args__ = (UniqueConstraint("staff_id", "date", name="uq_attendance_staff_date"),)

    id = Column(Integer, primary_key=True, index=True)
    staff_id = Column(String(64), nullable=False, index=True)
    staff_name = Column(String(100), default="Unknown")
    date = Column(Date, nullable=False, index=True)
    clock_in = Column(String(5))                             # HH:MM
    clock_out = Column(String(5))
    status = Column(SQLEnum(AttendanceStatus, values_callable=lambda e: [m.value for m in e]),
                    default=AttendanceStatus.ABSENT)
    hours_worked = Column(Float)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
