"""
Built-in content served when the database cannot be reached
"""
import time
from datetime import date

_STANDARD_INCLUSIONS = [
    {"icon": "Wind", "text": "Air-conditioned"},
    {"icon": "Refrigerator", "text": "Mini-fridge"},
    {"icon": "Tv", "text": "Flat-screen TV"},
    {"icon": "Wifi", "text": "Free WiFi"},
]

DEMO_ROOMS = [
    {
        "id": "room1",
        "name": "Beachfront Room",
        "type": "room",
        "capacity": "up to 4 pax",
        "image": "/images/piel1.jpg",
        "images": ["/images/piel1.jpg", "/images/piel2.jpg"],
        "price": "₱3,500",
        "period": "/night",
        "inclusions": [{"icon": "Users", "text": "Direct beach access"}, *_STANDARD_INCLUSIONS,
                       {"icon": "ShowerHead", "text": "Hot shower"}],
        "popular": True,
        "features": ["Table Cottage", "Extra mattress"],
        "description": "Wake up to the sound of waves in our Beachfront Room. This cozy "
                       "accommodation offers direct beach access and stunning ocean views.",
        "order": 1,
        "status": "available",
    },
    {
        "id": "room2",
        "name": "Barkada Room",
        "type": "room",
        "capacity": "up to 10 pax",
        "image": "/images/piel3.jpg",
        "images": ["/images/piel3.jpg"],
        "price": "₱5,500",
        "period": "/night",
        "inclusions": [{"icon": "Users", "text": "Spacious layout"}, *_STANDARD_INCLUSIONS,
                       {"icon": "ShowerHead", "text": "Hot shower"}],
        "popular": False,
        "features": ["Table Cottage", "Extra mattresses"],
        "description": "Our spacious Barkada Room is designed for groups and families with "
                       "ample space for up to 10 guests.",
        "order": 2,
        "status": "booked",
        "current_booking_id": "demo2",
        "current_guest_name": "John Chen",
        "current_check_in": date(2026, 2, 20),
        "current_check_out": date(2026, 2, 22),
    },
    {
        "id": "room3",
        "name": "Family Room",
        "type": "room",
        "capacity": "up to 15 pax",
        "image": "/images/piel2.jpg",
        "images": ["/images/piel2.jpg", "/images/piel4.jpg"],
        "price": "₱7,500",
        "period": "/night",
        "inclusions": [{"icon": "Users", "text": "Large family size"}, *_STANDARD_INCLUSIONS,
                       {"icon": "ShowerHead", "text": "Enclosed shower"}],
        "popular": False,
        "features": ["Private toilet", "Table Cottage"],
        "description": "The ultimate family accommodation! This expansive room comfortably "
                       "hosts up to 15 guests.",
        "order": 3,
        "status": "available",
    },
]

DEMO_GALLERY = [
    {"id": "img1", "url": "/images/piel10.jpg", "title": "Welcome to Piel", "category": "Resort", "order": 1},
    {"id": "img2", "url": "/images/piel4.jpg", "title": "Amenities Overview", "category": "Amenities", "order": 2},
    {"id": "img3", "url": "/images/piel1.jpg", "title": "Beachfront Bliss", "category": "Beach", "order": 3},
    {"id": "img4", "url": "/images/piel3.jpg", "title": "Barkada Room", "category": "Rooms",
     "col_span": "col-span-1 md:col-span-2", "order": 4},
    {"id": "img5", "url": "/images/piel2.jpg", "title": "Family Room", "category": "Rooms", "order": 5},
    {"id": "img6", "url": "/images/piel7.jpg", "title": "Sunset Dining", "category": "Dining", "order": 6},
    {"id": "img7", "url": "/images/piel9.jpg", "title": "Resort Architecture", "category": "Resort", "order": 7},
    {"id": "img8", "url": "/images/piel8.jpg", "title": "Evening Beach", "category": "Beach",
     "col_span": "col-span-1 md:col-span-2", "order": 8},
    {"id": "img9", "url": "/images/piel5.jpg", "title": "Glamping", "category": "Experience", "order": 9},
    {"id": "img10", "url": "/images/piel6.jpg", "title": "Beach Camping", "category": "Experience", "order": 10},
]

DEMO_TESTIMONIALS = [
    {
        "id": "test1", "name": "Maria Santos", "role": "Family Vacation", "rating": 5,
        "text": "Absolutely amazing experience! The beachfront room was perfect, and the staff was "
                "incredibly hospitable. Will definitely be back!",
        "stay_date": "December 2025", "order": 1,
    },
    {
        "id": "test2", "name": "John & Lisa Chen", "role": "Couple's Getaway", "rating": 5,
        "text": "We came here for our honeymoon and it exceeded all expectations. The beach "
                "glamping experience was magical.",
        "stay_date": "November 2025", "order": 2,
    },
    {
        "id": "test3", "name": "Mark Rivera", "role": "Barkada Trip", "rating": 5,
        "text": "Perfect for group trips! Our barkada room was spacious and the videoke nights "
                "were legendary. Great value for money!",
        "stay_date": "October 2025", "order": 3,
    },
    {
        "id": "test4", "name": "Emily Thompson", "role": "Solo Traveler", "rating": 5,
        "text": "A peaceful retreat away from the city noise. The staff made me feel so welcome.",
        "stay_date": "September 2025", "order": 4,
    },
    {
        "id": "test5", "name": "David & Jennifer", "role": "Anniversary Celebration", "rating": 5,
        "text": "We celebrated our anniversary here and it was perfect. The special dinner setup "
                "on the beach was romantic.",
        "stay_date": "August 2025", "order": 5,
    },
    {
        "id": "test6", "name": "Robert Garcia", "role": "Corporate Event", "rating": 5,
        "text": "We hosted our team building here and the function hall was excellent. A great "
                "venue for events!",
        "stay_date": "July 2025", "order": 6,
    },
]

DEMO_BOOKINGS = [
    {
        "id": "demo1", "name": "Maria Santos", "email": "maria@example.com", "phone": "09123456789",
        "check_in": date(2026, 2, 15), "check_out": date(2026, 2, 18), "guests": 4,
        "room_type": "Beachfront Room", "message": "We want early check-in if possible",
        "status": "pending",
    },
    {
        "id": "demo2", "name": "John Chen", "email": "john@example.com", "phone": "09123456790",
        "check_in": date(2026, 2, 20), "check_out": date(2026, 2, 22), "guests": 2,
        "room_type": "Barkada Room", "message": "Honeymoon package please",
        "status": "confirmed",
    },
    {
        "id": "demo3", "name": "Group Booking", "email": "group@example.com", "phone": "09123456791",
        "check_in": date(2026, 3, 1), "check_out": date(2026, 3, 5), "guests": 15,
        "room_type": "Family Room", "message": "Team building event",
        "status": "pending",
    },
]


def demo_id() -> str:
    """Placeholder id for a record that could not be stored"""
    return f"demo-{int(time.time() * 1000)}"


def demo_rooms(status=None):
    if status is None:
        return list(DEMO_ROOMS)
    return [r for r in DEMO_ROOMS if r.get("status", "available") == status]


def demo_bookings(status=None):
    if status is None:
        return list(DEMO_BOOKINGS)
    return [b for b in DEMO_BOOKINGS if b["status"] == status]
