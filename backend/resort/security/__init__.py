# Security module
from resort.security.auth import (
    get_password_hash, verify_password, create_session_token,
    require_admin, get_current_staff, get_current_guest,
    require_admin_or_staff, require_staff_permission
)

__all__ = [
    'get_password_hash', 'verify_password', 'create_session_token',
    'require_admin', 'get_current_staff', 'get_current_guest',
    'require_admin_or_staff', 'require_staff_permission'
]
