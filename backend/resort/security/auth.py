"""
Authentication and session cookies

Each portal has its own HTTP-only cookie holding a signed JWT:
admin_auth (admin back-office), staff_auth (staff portal), guest_auth (guest portal).
Staff and guest tokens carry a token id that must match the one stored on the
account, so logging in again invalidates the previous session.
"""
import bcrypt
import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, UTC
from typing import Optional, Union, Dict
from fastapi import Cookie, Depends, Response
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from resort.config import settings
from resort.database import get_db
from resort.exceptions import AuthenticationError, AccountDisabledError, PermissionDeniedError
from resort.models.entities import Guest, Staff
from resort.security.permissions import get_permissions

logger = logging.getLogger(__name__)

ADMIN_COOKIE = "admin_auth"
STAFF_COOKIE = "staff_auth"
GUEST_COOKIE = "guest_auth"

DEMO_STAFF_ID = "demo-user-id"


def get_password_hash(password: str) -> str:
    """Hash a password"""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its hash"""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # malformed stored hash
        return False


def new_token_id() -> str:
    return secrets.token_hex(16)


def create_session_token(subject: str, kind: str, expires_in: timedelta,
                         token_id: Optional[str] = None, demo: bool = False) -> str:
    """Sign a session token for one portal"""
    to_encode = {
        "sub": subject,
        "kind": kind,
        "exp": datetime.now(UTC) + expires_in,
    }
    if token_id is not None:
        to_encode["jti"] = token_id
    if demo:
        to_encode["demo"] = True
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: Optional[str], kind: str) -> dict:
    """Decode a session token, checking it was issued for the given portal"""
    if not token:
        raise AuthenticationError("Not authenticated")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid or expired session")
    if payload.get("kind") != kind or not payload.get("sub"):
        raise AuthenticationError("Invalid or expired session")
    return payload


def set_session_cookie(response: Response, name: str, token: str, max_age: timedelta) -> None:
    response.set_cookie(
        key=name,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=int(max_age.total_seconds()),
        path="/",
    )


def clear_session_cookie(response: Response, name: str) -> None:
    response.delete_cookie(key=name, path="/")


# ============== Session lengths ==============

def admin_session_length() -> timedelta:
    return timedelta(hours=settings.ADMIN_SESSION_HOURS)


def staff_session_length() -> timedelta:
    return timedelta(hours=settings.STAFF_SESSION_HOURS)


def guest_session_length() -> timedelta:
    return timedelta(days=settings.GUEST_SESSION_DAYS)


# ============== Principals ==============

@dataclass
class StaffPrincipal:
    """The staff member behind a staff session (a database row or the demo user)"""
    id: Union[int, str]
    username: str
    email: str
    full_name: str
    role: str
    department: str = "General"
    is_demo: bool = False
    permissions: Dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_staff(cls, staff: Staff) -> "StaffPrincipal":
        return cls(
            id=staff.id,
            username=staff.username,
            email=staff.email,
            full_name=staff.full_name,
            role=staff.role,
            department=staff.department or "General",
            permissions=get_permissions(staff.role).as_dict(),
        )

    @property
    def staff_id(self) -> str:
        return str(self.id)

    def can(self, permission: str) -> bool:
        return self.permissions.get(permission, False)


def demo_staff_principal() -> StaffPrincipal:
    return StaffPrincipal(
        id=DEMO_STAFF_ID,
        username=settings.DEMO_STAFF_USERNAME,
        email="demo@piel-lighthouse.com",
        full_name="Demo Staff",
        role="staff",
        department="General",
        is_demo=True,
        permissions=get_permissions("staff").as_dict(),
    )


@dataclass
class AdminPrincipal:
    username: str
    role: str = "admin"

    def can(self, permission: str) -> bool:
        return True


# ============== Dependencies ==============

def require_admin(admin_auth: Optional[str] = Cookie(None)) -> AdminPrincipal:
    """Back-office session"""
    payload = decode_session_token(admin_auth, "admin")
    return AdminPrincipal(username=payload["sub"])


def get_current_staff(
    staff_auth: Optional[str] = Cookie(None),
    db: Session = Depends(get_db)
) -> StaffPrincipal:
    """Staff portal session"""
    payload = decode_session_token(staff_auth, "staff")

    if payload.get("demo"):
        if not settings.DEMO_MODE:
            raise AuthenticationError("Demo sessions are disabled")
        return demo_staff_principal()

    staff = db.query(Staff).filter(Staff.id == int(payload["sub"])).first()
    if not staff or staff.token_id != payload.get("jti"):
        raise AuthenticationError("Invalid or expired session")
    if not staff.is_active:
        raise AccountDisabledError("Account is deactivated. Please contact admin.")
    return StaffPrincipal.from_staff(staff)


def get_current_guest(
    guest_auth: Optional[str] = Cookie(None),
    db: Session = Depends(get_db)
) -> Guest:
    """Guest portal session"""
    payload = decode_session_token(guest_auth, "guest")

    guest = db.query(Guest).filter(Guest.id == int(payload["sub"])).first()
    if not guest or guest.token_id != payload.get("jti"):
        raise AuthenticationError("Invalid or expired session")
    if not guest.is_active:
        raise AccountDisabledError("Account is deactivated. Please contact admin.")
    return guest


def require_admin_or_staff(
    admin_auth: Optional[str] = Cookie(None),
    staff_auth: Optional[str] = Cookie(None),
    db: Session = Depends(get_db)
) -> Union[AdminPrincipal, StaffPrincipal]:
    """Admin session, or else any active staff session"""
    if admin_auth:
        try:
            return require_admin(admin_auth)
        except AuthenticationError:
            if not staff_auth:
                raise
    return get_current_staff(staff_auth, db)


def require_staff_permission(permission: str):
    """Admin, or a staff member whose role grants the permission"""
    def permission_checker(
        principal: Union[AdminPrincipal, StaffPrincipal] = Depends(require_admin_or_staff)
    ):
        if not principal.can(permission):
            raise PermissionDeniedError(f"Missing permission: {permission}")
        return principal
    return permission_checker
