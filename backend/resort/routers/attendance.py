"""
Attendance routes
Staff clock in/out from the staff portal; the admin reviews and corrects records
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from resort.database import get_db
from resort.exceptions import ResortError
from resort.models.schemas import (
    ClockRequest, ClockResponse, AttendanceListResponse, AttendanceResponse,
    AdminAttendanceResponse, AttendanceStats, AttendanceUpsert
)
from resort.security.auth import StaffPrincipal, get_current_staff, require_admin
from resort.services.attendance_service import AttendanceService, attendance_stats, CLOCK_IN

staff_router = APIRouter(prefix="/api/staff/attendance", tags=["Attendance"])
admin_router = APIRouter(prefix="/api/admin/attendance", tags=["Attendance"])


# ============== Staff portal ==============

@staff_router.post("", response_model=ClockResponse)
def clock(
    data: ClockRequest,
    db: Session = Depends(get_db),
    principal: StaffPrincipal = Depends(get_current_staff)
):
    try:
        record = AttendanceService(db).clock(principal, data.action)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    message = "Clocked in successfully" if data.action == CLOCK_IN else "Clocked out successfully"
    return ClockResponse(record=record, message=message)


@staff_router.get("", response_model=AttendanceListResponse)
def my_attendance(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
    principal: StaffPrincipal = Depends(get_current_staff)
):
    """The signed-in staff member's own records"""
    records = AttendanceService(db).list_records(principal.staff_id, day)
    return AttendanceListResponse(attendance=records)


# ============== Back-office ==============

@admin_router.get("", response_model=AdminAttendanceResponse)
def admin_attendance(
    day: Optional[date] = Query(None, alias="date"),
    staff_id: Optional[str] = Query(None, alias="staffId"),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """One day's records (today by default); the counters always cover every staff member"""
    service = AttendanceService(db)
    records = service.admin_records(day, staff_id)
    day_records = service.admin_records(day) if staff_id else records
    return AdminAttendanceResponse(attendance=records, stats=AttendanceStats(**attendance_stats(day_records)))


@admin_router.post("", response_model=AttendanceResponse)
def upsert_attendance(
    data: AttendanceUpsert,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Create or correct the record for a staff member and date"""
    return AttendanceService(db).upsert(data)
