# API Routers
from resort.routers import auth, bookings, rooms, content, staff, attendance, health

__all__ = ['auth', 'bookings', 'rooms', 'content', 'staff', 'attendance', 'health']
