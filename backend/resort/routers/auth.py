"""
Authentication routes
Login, logout and session checks for the admin back-office, the staff portal
and the guest portal
"""
import logging
import secrets
from typing import Optional
from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from resort.config import settings
from resort.database import get_db
from resort.exceptions import ResortError, AuthenticationError
from resort.models.schemas import (
    AdminLogin, AdminUser, AdminAuthResponse,
    StaffLogin, StaffProfile, StaffAuthResponse, StaffCheckResponse,
    GuestRegister, GuestLogin, GuestProfile, GuestAuthResponse, GuestCheckResponse,
    MutationResponse
)
from resort.security.auth import (
    ADMIN_COOKIE, STAFF_COOKIE, GUEST_COOKIE,
    create_session_token, set_session_cookie, clear_session_cookie,
    admin_session_length, staff_session_length, guest_session_length,
    require_admin, get_current_staff, get_current_guest
)
from resort.services.guest_service import GuestService
from resort.services.staff_service import StaffService

logger = logging.getLogger(__name__)

admin_router = APIRouter(prefix="/api/admin/auth", tags=["Auth"])
staff_router = APIRouter(prefix="/api/staff", tags=["Auth"])
guest_router = APIRouter(prefix="/api/guest", tags=["Auth"])


def _same(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def _not_authenticated(exc: ResortError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"authenticated": False, "detail": str(exc)}
    )


# ============== Admin ==============

@admin_router.post("", response_model=AdminAuthResponse)
def admin_login(data: AdminLogin, response: Response):
    """Single configured admin account"""
    valid = _same(data.username, settings.ADMIN_USERNAME) and _same(data.password, settings.ADMIN_PASSWORD)
    if not valid:
        logger.warning(f"Failed admin login for {data.username}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_session_token(data.username, "admin", admin_session_length())
    set_session_cookie(response, ADMIN_COOKIE, token, admin_session_length())
    return AdminAuthResponse(message="Login successful", user=AdminUser(username=data.username))


@admin_router.delete("", response_model=MutationResponse)
def admin_logout(response: Response):
    clear_session_cookie(response, ADMIN_COOKIE)
    return MutationResponse(message="Logged out successfully")


@admin_router.get("/check")
def admin_check(admin_auth: Optional[str] = Cookie(None)):
    try:
        admin = require_admin(admin_auth)
    except AuthenticationError as e:
        return _not_authenticated(e)
    return {"authenticated": True, "user": AdminUser(username=admin.username).model_dump()}


# ============== Staff portal ==============

@staff_router.post("/register")
def staff_register():
    """Staff accounts are created by the admin only"""
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Self-registration is disabled. Please contact admin to create an account."
    )


@staff_router.post("/auth", response_model=StaffAuthResponse)
def staff_login(data: StaffLogin, response: Response, db: Session = Depends(get_db)):
    try:
        principal, token = StaffService(db).authenticate(data.username, data.password)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    set_session_cookie(response, STAFF_COOKIE, token, staff_session_length())
    logger.info(f"Staff login: {principal.username}")
    return StaffAuthResponse(
        message="Login successful",
        user=StaffProfile.model_validate(principal),
        demo_mode=principal.is_demo
    )


@staff_router.delete("/auth", response_model=MutationResponse)
def staff_logout(response: Response, staff_auth: Optional[str] = Cookie(None),
                 db: Session = Depends(get_db)):
    StaffService(db).revoke_session(staff_auth)
    clear_session_cookie(response, STAFF_COOKIE)
    return MutationResponse(message="Logged out successfully")


@staff_router.get("/auth/check", response_model=StaffCheckResponse)
def staff_check(staff_auth: Optional[str] = Cookie(None), db: Session = Depends(get_db)):
    """Current staff member with the permission set of their role"""
    try:
        principal = get_current_staff(staff_auth, db)
    except AuthenticationError as e:
        return _not_authenticated(e)
    return StaffCheckResponse(
        authenticated=True,
        user=StaffProfile.model_validate(principal),
        demo_mode=principal.is_demo
    )


# ============== Guest portal ==============

@guest_router.post("/register", response_model=GuestAuthResponse, status_code=status.HTTP_201_CREATED)
def guest_register(data: GuestRegister, response: Response, db: Session = Depends(get_db)):
    try:
        guest, token = GuestService(db).register(data)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    set_session_cookie(response, GUEST_COOKIE, token, guest_session_length())
    return GuestAuthResponse(message="Registration successful", user=GuestProfile.model_validate(guest))


@guest_router.post("/auth", response_model=GuestAuthResponse)
def guest_login(data: GuestLogin, response: Response, db: Session = Depends(get_db)):
    try:
        guest, token = GuestService(db).authenticate(data.email, data.password)
    except ResortError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    set_session_cookie(response, GUEST_COOKIE, token, guest_session_length())
    return GuestAuthResponse(message="Login successful", user=GuestProfile.model_validate(guest))


@guest_router.delete("/auth", response_model=MutationResponse)
def guest_logout(response: Response, guest_auth: Optional[str] = Cookie(None),
                 db: Session = Depends(get_db)):
    GuestService(db).revoke_session(guest_auth)
    clear_session_cookie(response, GUEST_COOKIE)
    return MutationResponse(message="Logged out successfully")


@guest_router.get("/auth/check", response_model=GuestCheckResponse)
def guest_check(guest_auth: Optional[str] = Cookie(None), db: Session = Depends(get_db)):
    try:
        guest = get_current_guest(guest_auth, db)
    except AuthenticationError as e:
        return _not_authenticated(e)
    return GuestCheckResponse(authenticated=True, guest=GuestProfile.model_validate(guest))
