"""
Staff account service
Accounts are created by the admin; staff log in to the staff portal
"""
import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from resort.config import settings
from resort.exceptions import (
    ValidationError, ConflictError, NotFoundError, AuthenticationError, AccountDisabledError
)
from resort.models.entities import Staff, utcnow
from resort.models.schemas import StaffCreate, StaffUpdate
from resort.security.auth import (
    StaffPrincipal, demo_staff_principal, get_password_hash, verify_password,
    create_session_token, decode_session_token, new_token_id, staff_session_length
)
from resort.security.permissions import is_known_role

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def _check_role(role: str) -> None:
    if not is_known_role(role):
        raise ValidationError(f"Unknown role: {role}")


class StaffService:
    """Staff account service"""

    def __init__(self, db: Session):
        self.db = db

    def get_staff_list(self) -> List[Staff]:
        return self.db.query(Staff).order_by(Staff.created_at.desc(), Staff.id.desc()).all()

    def get_staff(self, staff_id: int) -> Optional[Staff]:
        return self.db.query(Staff).filter(Staff.id == staff_id).first()

    def get_staff_by_username(self, username: str) -> Optional[Staff]:
        return self.db.query(Staff).filter(Staff.username == username).first()

    def create_staff(self, data: StaffCreate) -> Staff:
        _check_password(data.password)
        _check_role(data.role)
        if self.get_staff_by_username(data.username):
            raise ConflictError(f"Username '{data.username}' already exists")

        staff = Staff(
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
            full_name=data.full_name,
            department=data.department or "General",
            role=data.role,
            phone=data.phone,
            is_active=True,
        )
        self.db.add(staff)
        self.db.commit()
        self.db.refresh(staff)
        logger.info(f"Staff account created: {staff.username} ({staff.role})")
        return staff

    def update_staff(self, data: StaffUpdate) -> Staff:
        """Edit a profile or toggle is_active; deactivating also ends the member's session"""
        staff = self.get_staff(data.staff_id)
        if not staff:
            raise NotFoundError("Staff member not found")

        update_data = data.model_dump(exclude_unset=True, exclude={"staff_id", "password"})
        if "role" in update_data and update_data["role"] is not None:
            _check_role(update_data["role"])
        if data.password is not None:
            _check_password(data.password)
            staff.password_hash = get_password_hash(data.password)

        for key, value in update_data.items():
            if value is not None:
                setattr(staff, key, value)
        if update_data.get("is_active") is False:
            staff.token_id = None

        staff.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(staff)
        return staff

    # ============== Sessions ==============

    def authenticate(self, username: str, password: str) -> Tuple[StaffPrincipal, str]:
        """Check credentials and open a session; returns (principal, token)"""
        if settings.DEMO_MODE and username == settings.DEMO_STAFF_USERNAME \
                and password == settings.DEMO_STAFF_PASSWORD:
            logger.info("DEMO_MODE: authenticating demo staff user")
            principal = demo_staff_principal()
            token = create_session_token(principal.staff_id, "staff", staff_session_length(), demo=True)
            return principal, token

        staff = self.get_staff_by_username(username)
        if not staff:
            raise AuthenticationError("Invalid credentials")
        if not staff.is_active:
            raise AccountDisabledError("Account is deactivated. Please contact admin.")
        if not verify_password(password, staff.password_hash):
            raise AuthenticationError("Invalid credentials")

        staff.token_id = new_token_id()
        staff.updated_at = utcnow()
        self.db.commit()
        token = create_session_token(str(staff.id), "staff", staff_session_length(),
                                     token_id=staff.token_id)
        return StaffPrincipal.from_staff(staff), token

    def revoke_session(self, token: Optional[str]) -> None:
        try:
            payload = decode_session_token(token, "staff")
        except AuthenticationError:
            return
        if payload.get("demo"):
            return
        staff = self.get_staff(int(payload["sub"]))
        if staff and staff.token_id == payload.get("jti"):
            staff.token_id = None
            self.db.commit()
