# Business Services
from resort.services.booking_service import BookingService
from resort.services.room_service import RoomService
from resort.services.content_service import TestimonialService, GalleryService
from resort.services.guest_service import GuestService
from resort.services.staff_service import StaffService
from resort.services.attendance_service import AttendanceService

__all__ = [
    'BookingService', 'RoomService', 'TestimonialService', 'GalleryService',
    'GuestService', 'StaffService', 'AttendanceService'
]
