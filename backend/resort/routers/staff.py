"""
Staff management routes (admin back-office)
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from resort.database import get_db
from resort.exceptions import ResortError
from resort.models.schemas import (
    StaffCreate, StaffUpdate, StaffResponse, StaffListResponse, StaffCreatedResponse
)
from resort.security.auth import require_admin
from resort.services.staff_service import StaffService

router = APIRouter(prefix="/api/admin/staff", tags=["Staff"])


@router.get("", response_model=StaffListResponse)
def list_staff(db: Session = Depends(get_db), admin=Depends(require_admin)):
    """All staff accounts, newest first"""
    return StaffListResponse(staff=StaffService(db).get_staff_list())


@router.post("", response_model=StaffCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_staff(
    data: StaffCreate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        staff = StaffService(db).create_staff(data)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return StaffCreatedResponse(staff_id=staff.id)


@router.patch("", response_model=StaffResponse)
def update_staff(
    data: StaffUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Activate/deactivate a member or edit their profile"""
    try:
        return StaffService(db).update_staff(data)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
