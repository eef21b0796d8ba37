"""
Attendance service
Staff clock in/out once per day; the admin reviews and corrects the records
"""
import logging
from datetime import date, datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from resort.config import settings
from resort.exceptions import ValidationError
from resort.models.entities import Attendance, AttendanceStatus, utcnow
from resort.models.schemas import AttendanceUpsert
from resort.security.auth import StaffPrincipal

logger = logging.getLogger(__name__)

CLOCK_IN = "clock-in"
CLOCK_OUT = "clock-out"
TIME_FORMAT = "%H:%M"


def classify_clock_in(clock_in: str, threshold: Optional[str] = None) -> AttendanceStatus:
    """Late when the clock-in time is strictly after the threshold"""
    threshold = threshold or settings.LATE_THRESHOLD
    late = datetime.strptime(clock_in, TIME_FORMAT) > datetime.strptime(threshold, TIME_FORMAT)
    return AttendanceStatus.LATE if late else AttendanceStatus.PRESENT


def hours_between(clock_in: Optional[str], clock_out: str) -> Optional[float]:
    if not clock_in:
        return None
    delta = datetime.strptime(clock_out, TIME_FORMAT) - datetime.strptime(clock_in, TIME_FORMAT)
    return round(delta.total_seconds() / 3600, 2)


def attendance_stats(records: List[Attendance]) -> dict:
    """Daily counters; total is the number of distinct staff with a record"""
    counts = {status: 0 for status in AttendanceStatus}
    for record in records:
        counts[AttendanceStatus(record.status)] += 1
    total = len({r.staff_id for r in records})
    attended = counts[AttendanceStatus.PRESENT] + counts[AttendanceStatus.LATE]
    return {
        "total": total,
        "present": counts[AttendanceStatus.PRESENT],
        "late": counts[AttendanceStatus.LATE],
        "absent": counts[AttendanceStatus.ABSENT],
        "on_leave": counts[AttendanceStatus.ON_LEAVE],
        "attendance_rate": round(attended / total * 100) if total else 0,
    }


class AttendanceService:
    """Attendance service"""

    def __init__(self, db: Session):
        self.db = db

    def get_record(self, staff_id: str, day: date) -> Optional[Attendance]:
        return self.db.query(Attendance).filter(
            Attendance.staff_id == staff_id,
            Attendance.date == day
        ).first()

    # ============== Staff portal ==============

    def clock(self, principal: StaffPrincipal, action: str,
              now: Optional[datetime] = None) -> Attendance:
        """Clock in or out for today, creating today's record on first use"""
        if action not in (CLOCK_IN, CLOCK_OUT):
            raise ValidationError("Invalid action")

        now = now or datetime.now()
        today = now.date()
        time_str = now.strftime(TIME_FORMAT)

        record = self.get_record(principal.staff_id, today)
        if record is None:
            record = Attendance(
                staff_id=principal.staff_id,
                staff_name=principal.full_name or "Staff Member",
                date=today,
                status=AttendanceStatus.ABSENT,
            )
            self.db.add(record)

        if action == CLOCK_IN:
            record.clock_in = time_str
            record.status = classify_clock_in(time_str)
        else:
            record.clock_out = time_str
            record.hours_worked = hours_between(record.clock_in, time_str)

        record.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(record)
        logger.info(f"{principal.username} {action} at {time_str} ({record.status})")
        return record

    def list_records(self, staff_id: Optional[str] = None,
                     day: Optional[date] = None) -> List[Attendance]:
        """Records newest date first"""
        query = self.db.query(Attendance)
        if staff_id:
            query = query.filter(Attendance.staff_id == staff_id)
        if day:
            query = query.filter(Attendance.date == day)
        return query.order_by(Attendance.date.desc(), Attendance.id.desc()).all()

    # ============== Back-office ==============

    def admin_records(self, day: Optional[date] = None,
                      staff_id: Optional[str] = None) -> List[Attendance]:
        """One day's records (today by default), latest clock-in first"""
        query = self.db.query(Attendance).filter(Attendance.date == (day or date.today()))
        if staff_id:
            query = query.filter(Attendance.staff_id == staff_id)
        return query.order_by(Attendance.date.desc(), Attendance.clock_in.desc()).all()

    def upsert(self, data: AttendanceUpsert) -> Attendance:
        """Create or correct the record for (staff_id, date)"""
        record = self.get_record(data.staff_id, data.date)
        values = data.model_dump(exclude_unset=True, exclude={"staff_id", "date"})

        if record is None:
            record = Attendance(
                staff_id=data.staff_id,
                date=data.date,
                staff_name=values.pop("staff_name", None) or "Unknown",
                status=values.pop("status", None) or AttendanceStatus.ABSENT,
            )
            self.db.add(record)
            logger.info(f"Attendance record created for {data.staff_id} on {data.date}")

        for key, value in values.items():
            if value is not None:
                setattr(record, key, value)

        record.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(record)
        return record
