"""
Guest account service
Registration and login for the guest portal
"""
import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from resort.exceptions import (
    ValidationError, ConflictError, AuthenticationError, AccountDisabledError
)
from resort.models.entities import Guest, utcnow
from resort.models.schemas import GuestRegister, EMAIL_PATTERN
from resort.security.auth import (
    get_password_hash, verify_password, create_session_token, decode_session_token,
    new_token_id, guest_session_length
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class GuestService:
    """Guest account service"""

    def __init__(self, db: Session):
        self.db = db

    def get_guest(self, guest_id: int) -> Optional[Guest]:
        return self.db.query(Guest).filter(Guest.id == guest_id).first()

    def get_guest_by_email(self, email: str) -> Optional[Guest]:
        return self.db.query(Guest).filter(Guest.email == email.strip().lower()).first()

    def register(self, data: GuestRegister) -> Tuple[Guest, str]:
        """Create an account and open a session; returns (guest, token)"""
        if not EMAIL_PATTERN.match(data.email):
            raise ValidationError("Invalid email format")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if self.get_guest_by_email(data.email):
            raise ConflictError("An account with this email already exists")

        guest = Guest(
            email=data.email.lower(),
            password_hash=get_password_hash(data.password),
            full_name=data.full_name,
            phone=data.phone,
            address=data.address or "",
            is_active=True,
        )
        self.db.add(guest)
        self.db.flush()
        token = self._open_session(guest)
        self.db.commit()
        self.db.refresh(guest)
        logger.info(f"Guest registered: {guest.email}")
        return guest, token

    def authenticate(self, email: str, password: str) -> Tuple[Guest, str]:
        """Check credentials and open a new session; returns (guest, token)"""
        guest = self.get_guest_by_email(email)
        if not guest:
            raise AuthenticationError("Invalid credentials")
        if not guest.is_active:
            raise AccountDisabledError("Account is deactivated. Please contact admin.")
        if not verify_password(password, guest.password_hash):
            raise AuthenticationError("Invalid credentials")

        token = self._open_session(guest)
        guest.updated_at = utcnow()
        self.db.commit()
        return guest, token

    def revoke_session(self, token: Optional[str]) -> None:
        """Forget the session behind a token; unknown or expired tokens are ignored"""
        try:
            payload = decode_session_token(token, "guest")
        except AuthenticationError:
            return
        guest = self.get_guest(int(payload["sub"]))
        if guest and guest.token_id == payload.get("jti"):
            guest.token_id = None
            self.db.commit()

    def _open_session(self, guest: Guest) -> str:
        # rotating the token id invalidates any older session
        guest.token_id = new_token_id()
        return create_session_token(str(guest.id), "guest", guest_session_length(),
                                    token_id=guest.token_id)
