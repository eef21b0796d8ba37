"""
Lighthouse Resort backend
Booking, content and staff management API for the resort website and portals
"""
__version__ = "1.0.0"
