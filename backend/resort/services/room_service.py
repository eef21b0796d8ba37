"""
Room service
Accommodation listings and their availability
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from resort.exceptions import NotFoundError, ValidationError
from resort.models.entities import Room, RoomStatus, Booking, utcnow
from resort.models.schemas import RoomCreate, RoomUpdate

logger = logging.getLogger(__name__)


class RoomService:
    """Room service"""

    def __init__(self, db: Session):
        self.db = db

    def get_rooms(self, status: Optional[RoomStatus] = None) -> List[Room]:
        """Rooms in display order; rooms without a status count as available"""
        query = self.db.query(Room)
        if status == RoomStatus.AVAILABLE:
            query = query.filter((Room.status == RoomStatus.AVAILABLE) | (Room.status.is_(None)))
        elif status:
            query = query.filter(Room.status == status)
        return query.order_by(Room.order.asc(), Room.id.asc()).all()

    def get_room(self, room_id: int) -> Optional[Room]:
        return self.db.query(Room).filter(Room.id == room_id).first()

    def create_room(self, data: RoomCreate) -> Room:
        room = Room(**data.model_dump(mode="json"))
        self.db.add(room)
        self.db.commit()
        self.db.refresh(room)
        logger.info(f"Room created: {room.name} ({room.id})")
        return room

    def update_room(self, data: RoomUpdate) -> Room:
        room = self.get_room(data.id)
        if not room:
            raise NotFoundError("Room not found")

        update_data = data.model_dump(mode="json", exclude_unset=True, exclude={"id"})
        for key, value in update_data.items():
            if value is not None:
                setattr(room, key, value)
        if update_data.get("status") == RoomStatus.AVAILABLE.value:
            self._clear_current_booking(room)

        room.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(room)
        return room

    def delete_room(self, room_id: int) -> None:
        room = self.get_room(room_id)
        if not room:
            raise NotFoundError("Room not found")
        self.db.delete(room)
        self.db.commit()
        logger.info(f"Room deleted: {room_id}")

    def set_availability(self, room_id: int, status: RoomStatus,
                         booking_id: Optional[int] = None) -> Room:
        """Mark a room booked (optionally for a booking) or available again"""
        room = self.get_room(room_id)
        if not room:
            raise NotFoundError("Room not found")

        if status == RoomStatus.BOOKED:
            if booking_id is not None:
                booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
                if not booking:
                    raise ValidationError("Booking not found")
                room.current_booking_id = booking.id
                room.current_guest_name = booking.name
                room.current_check_in = booking.check_in
                room.current_check_out = booking.check_out
        else:
            self._clear_current_booking(room)

        room.status = status
        room.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(room)
        logger.info(f"Room {room_id} is now {status.value}")
        return room

    def get_status_summary(self) -> dict:
        rooms = self.get_rooms()
        booked = sum(1 for r in rooms if r.status == RoomStatus.BOOKED)
        return {"total": len(rooms), "available": len(rooms) - booked, "booked": booked}

    @staticmethod
    def _clear_current_booking(room: Room) -> None:
        room.current_booking_id = None
        room.current_guest_name = None
        room.current_check_in = None
        room.current_check_out = None
