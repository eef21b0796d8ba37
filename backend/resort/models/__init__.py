# Persisted entities
from resort.models.entities import (
    Booking, Room, Testimonial, GalleryImage, Guest, Staff, Attendance
)

__all__ = [
    'Booking', 'Room', 'Testimonial', 'GalleryImage', 'Guest', 'Staff', 'Attendance'
]
