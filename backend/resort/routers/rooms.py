"""
Room routes
Listings are public reads (marketing site, guest portal, staff portal);
changes go through the admin back-office
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from resort.database import get_db
from resort.exceptions import ResortError
from resort.models.entities import RoomStatus
from resort.models.schemas import (
    RoomCreate, RoomUpdate, RoomAvailabilityUpdate, RoomResponse,
    RoomListResponse, RoomSummaryResponse, MutationResponse
)
from resort.security.auth import require_admin, require_staff_permission
from resort.security.permissions import MANAGE_ROOMS
from resort.services.demo_data import demo_rooms
from resort.services.room_service import RoomService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/rooms", tags=["Rooms"])
guest_router = APIRouter(prefix="/api/guest/rooms", tags=["Guest portal"])


def _room_list(db: Session, room_status: Optional[RoomStatus]) -> RoomListResponse:
    try:
        rooms = RoomService(db).get_rooms(room_status)
    except SQLAlchemyError as e:
        logger.warning(f"Database not available, serving demo rooms: {e}")
        return RoomListResponse(
            rooms=demo_rooms(room_status.value if room_status else None),
            connected=False
        )
    return RoomListResponse(rooms=rooms)


@router.get("", response_model=RoomListResponse)
def list_rooms(
    room_status: Optional[RoomStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db)
):
    """All rooms in display order"""
    return _room_list(db, room_status)


@router.get("/summary", response_model=RoomSummaryResponse)
def room_summary(db: Session = Depends(get_db)):
    return RoomService(db).get_status_summary()


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    data: RoomCreate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    room = RoomService(db).create_room(data)
    return MutationResponse(message="Room created successfully", id=room.id)


@router.put("", response_model=RoomResponse)
def update_room(
    data: RoomUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return RoomService(db).update_room(data)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.delete("", response_model=MutationResponse)
def delete_room(
    room_id: Optional[int] = Query(None, alias="id"),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    if room_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Room ID is required")
    try:
        RoomService(db).delete_room(room_id)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return MutationResponse(message="Room deleted successfully", id=room_id)


@router.patch("/availability", response_model=RoomResponse)
def update_availability(
    data: RoomAvailabilityUpdate,
    db: Session = Depends(get_db),
    principal=Depends(require_staff_permission(MANAGE_ROOMS))
):
    """Mark a room booked (optionally for a booking) or available"""
    try:
        return RoomService(db).set_availability(data.id, data.status, data.booking_id)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@guest_router.get("", response_model=RoomListResponse)
def list_available_rooms(db: Session = Depends(get_db)):
    """Rooms a guest can book right now"""
    return _room_list(db, RoomStatus.AVAILABLE)
