"""
Pydantic schemas
Request/response validation; JSON field names are camelCase on the wire
"""
import re
from datetime import datetime, date
from typing import Optional, List, Union, Dict
from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
from resort.models.entities import BookingStatus, RoomStatus, RoomKind, AttendanceStatus

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

# Demo records use string ids ("room1", "demo-1700000000000")
RecordId = Union[int, str]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MutationResponse(CamelModel):
    success: bool = True
    message: str
    id: Optional[RecordId] = None


class AuthCheckResponse(CamelModel):
    authenticated: bool


# ============== Booking Schemas ==============

class BookingCreate(CamelModel):
    """Public booking form"""
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=120)
    phone: Optional[str] = Field(None, max_length=30)
    check_in: date
    check_out: date
    guests: int = Field(..., ge=1)
    room_type: Optional[str] = Field(None, max_length=100)
    room_id: Optional[int] = None
    message: Optional[str] = None

    @field_validator("room_id", "room_type", "phone", "message", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        return _blank_to_none(v)


class GuestBookingCreate(CamelModel):
    """Booking from the guest portal; contact details default to the account"""
    check_in: date
    check_out: date
    guests: int = Field(..., ge=1)
    guest_name: Optional[str] = Field(None, max_length=100)
    guest_email: Optional[str] = Field(None, max_length=120)
    guest_phone: Optional[str] = Field(None, max_length=30)
    room_type: Optional[str] = Field(None, max_length=100)
    room_id: Optional[int] = None
    message: Optional[str] = None

    @field_validator("room_id", "room_type", "guest_name", "guest_email", "guest_phone", "message",
                     mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        return _blank_to_none(v)


class BookingStatusUpdate(CamelModel):
    id: int
    status: BookingStatus


class BookingResponse(CamelModel):
    id: RecordId
    guest_id: Optional[int] = None
    name: str
    email: str
    phone: Optional[str] = ""
    check_in: date
    check_out: date
    guests: int
    room_type: Optional[str] = None
    room_id: Optional[int] = None
    message: Optional[str] = ""
    status: BookingStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingCreatedResponse(CamelModel):
    success: bool = True
    booking_id: str
    message: str


class BookingListResponse(CamelModel):
    bookings: List[BookingResponse]
    connected: bool = True


class GuestGroupResponse(CamelModel):
    """Bookings of one guest, grouped by email"""
    email: str
    name: str
    phone: Optional[str] = ""
    total_bookings: int
    last_visit: date
    upcoming: bool
    bookings: List[BookingResponse]


class CalendarDay(CamelModel):
    date: date
    status: str
    booking_count: int


class CalendarResponse(CamelModel):
    year: int
    month: int
    days: List[CalendarDay]


class BookingStatsResponse(CamelModel):
    total: int
    pending: int
    confirmed: int
    completed: int
    cancelled: int
    checked_in: int


# ============== Room Schemas ==============

class Inclusion(CamelModel):
    icon: str
    text: str


class RoomBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: RoomKind = RoomKind.ROOM
    capacity: str = ""
    image: str = ""
    images: List[str] = []
    price: str = ""
    period: str = "/night"
    inclusions: List[Inclusion] = []
    popular: bool = False
    features: List[str] = []
    description: str = ""
    order: int = 0


class RoomCreate(RoomBase):
    status: RoomStatus = RoomStatus.AVAILABLE


class RoomUpdate(CamelModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[RoomKind] = None
    capacity: Optional[str] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None
    price: Optional[str] = None
    period: Optional[str] = None
    inclusions: Optional[List[Inclusion]] = None
    popular: Optional[bool] = None
    features: Optional[List[str]] = None
    description: Optional[str] = None
    order: Optional[int] = None
    status: Optional[RoomStatus] = None


class RoomAvailabilityUpdate(CamelModel):
    id: int
    status: RoomStatus
    booking_id: Optional[int] = None


class RoomResponse(RoomBase):
    id: RecordId
    status: Optional[RoomStatus] = RoomStatus.AVAILABLE
    current_booking_id: Optional[RecordId] = None
    current_guest_name: Optional[str] = None
    current_check_in: Optional[date] = None
    current_check_out: Optional[date] = None
    created_at: Optional[datetime] = None


class RoomListResponse(CamelModel):
    rooms: List[RoomResponse]
    connected: bool = True


class RoomSummaryResponse(CamelModel):
    total: int
    available: int
    booked: int


# ============== Site Content Schemas ==============

class TestimonialBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    role: str = ""
    avatar: str = "/placeholder-user.jpg"
    rating: int = Field(default=5, ge=1, le=5)
    text: str = Field(..., min_length=1)
    stay_date: str = ""
    order: int = 0


class TestimonialCreate(TestimonialBase):
    pass


class TestimonialUpdate(CamelModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[str] = None
    avatar: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    text: Optional[str] = Field(None, min_length=1)
    stay_date: Optional[str] = None
    order: Optional[int] = None


class TestimonialResponse(TestimonialBase):
    id: RecordId
    created_at: Optional[datetime] = None


class TestimonialListResponse(CamelModel):
    testimonials: List[TestimonialResponse]
    connected: bool = True


class GalleryImageBase(CamelModel):
    url: str = Field(..., min_length=1, max_length=255)
    title: str = ""
    category: str = ""
    col_span: str = "col-span-1"
    order: int = 0


class GalleryImageCreate(GalleryImageBase):
    pass


class GalleryImageUpdate(CamelModel):
    id: int
    url: Optional[str] = Field(None, min_length=1, max_length=255)
    title: Optional[str] = None
    category: Optional[str] = None
    col_span: Optional[str] = None
    order: Optional[int] = None


class GalleryImageResponse(GalleryImageBase):
    id: RecordId
    created_at: Optional[datetime] = None


class GalleryListResponse(CamelModel):
    gallery: List[GalleryImageResponse]
    connected: bool = True


# ============== Guest Account Schemas ==============

class GuestRegister(CamelModel):
    email: str = Field(..., min_length=1, max_length=120)
    password: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=30)
    address: Optional[str] = Field(None, max_length=255)


class GuestLogin(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class GuestProfile(CamelModel):
    id: int
    email: str
    full_name: str
    phone: str
    address: Optional[str] = ""


class GuestAuthResponse(CamelModel):
    success: bool = True
    message: str
    user: GuestProfile


class GuestCheckResponse(AuthCheckResponse):
    guest: Optional[GuestProfile] = None


# ============== Staff Account Schemas ==============

class StaffCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=1, max_length=120)
    full_name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    department: str = "General"
    role: str = "staff"
    phone: str = ""


class StaffUpdate(CamelModel):
    staff_id: int
    is_active: Optional[bool] = None
    email: Optional[str] = Field(None, min_length=1, max_length=120)
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None

    @field_validator("password", mode="before")
    @classmethod
    def blank_password_unchanged(cls, v):
        return _blank_to_none(v)


class StaffResponse(CamelModel):
    id: int
    username: str
    email: str
    full_name: str
    department: Optional[str] = "General"
    role: str
    phone: Optional[str] = ""
    is_active: bool
    created_at: Optional[datetime] = None


class StaffListResponse(CamelModel):
    success: bool = True
    staff: List[StaffResponse]


class StaffCreatedResponse(CamelModel):
    success: bool = True
    staff_id: int


class StaffLogin(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class StaffProfile(CamelModel):
    id: RecordId
    username: str
    email: str
    full_name: str
    role: str
    department: Optional[str] = "General"
    permissions: Dict[str, bool] = {}


class StaffAuthResponse(CamelModel):
    success: bool = True
    message: str
    user: StaffProfile
    demo_mode: bool = False


class StaffCheckResponse(AuthCheckResponse):
    user: Optional[StaffProfile] = None
    demo_mode: bool = False


# ============== Admin Account Schemas ==============

class AdminLogin(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminUser(CamelModel):
    username: str
    role: str = "admin"


class AdminAuthResponse(CamelModel):
    success: bool = True
    message: str
    user: AdminUser


# ============== Attendance Schemas ==============

class ClockRequest(CamelModel):
    action: str = Field(..., min_length=1)


class AttendanceResponse(CamelModel):
    id: int
    staff_id: str
    staff_name: Optional[str] = None
    date: date
    clock_in: Optional[str] = None
    clock_out: Optional[str] = None
    status: AttendanceStatus
    hours_worked: Optional[float] = None
    created_at: Optional[datetime] = None


class ClockResponse(CamelModel):
    success: bool = True
    record: AttendanceResponse
    message: str


class AttendanceListResponse(CamelModel):
    attendance: List[AttendanceResponse]


class AttendanceStats(CamelModel):
    total: int = 0
    present: int = 0
    late: int = 0
    absent: int = 0
    on_leave: int = 0
    attendance_rate: int = 0


class AdminAttendanceResponse(CamelModel):
    success: bool = True
    attendance: List[AttendanceResponse]
    stats: AttendanceStats


class AttendanceUpsert(CamelModel):
    """Admin correction of one staff member's day"""
    staff_id: str = Field(..., min_length=1)
    staff_name: Optional[str] = None
    date: date
    clock_in: Optional[str] = Field(None, pattern=TIME_PATTERN)
    clock_out: Optional[str] = Field(None, pattern=TIME_PATTERN)
    status: Optional[AttendanceStatus] = None
    hours_worked: Optional[float] = Field(None, ge=0)

    @field_validator("staff_id", mode="before")
    @classmethod
    def staff_id_as_text(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator("clock_in", "clock_out", "staff_name", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        return _blank_to_none(v)


# ============== Health Schemas ==============

class HealthResponse(BaseModel):
    status: str
    services: Dict[str, str]
    error: Optional[str] = None
