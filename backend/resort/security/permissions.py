"""
Staff roles, departments and the permission matrix

Department roles come in three tiers (staff, supervisor, manager); the legacy
roles "staff", "manager" and "admin" are kept for older accounts.
"""
from dataclasses import dataclass, asdict
from typing import Dict, List

# Permission names
MANAGE_STAFF = "canManageStaff"
MANAGE_BOOKINGS = "canManageBookings"
MANAGE_ROOMS = "canManageRooms"
MANAGE_GUESTS = "canManageGuests"
VIEW_REPORTS = "canViewReports"
MANAGE_ATTENDANCE = "canManageAttendance"
ACCESS_ALL_DEPARTMENTS = "canAccessAllDepartments"


@dataclass(frozen=True)
class UserPermissions:
    canManageStaff: bool = False
    canManageBookings: bool = False
    canManageRooms: bool = False
    canManageGuests: bool = False
    canViewReports: bool = False
    canManageAttendance: bool = False
    canAccessAllDepartments: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)


NO_PERMISSIONS = UserPermissions()
ALL_PERMISSIONS = UserPermissions(*([True] * 7))

DEPARTMENT_ROLES: Dict[str, List[str]] = {
    "Front Desk": ["front_desk_agent", "front_desk_supervisor", "front_desk_manager"],
    "Housekeeping": ["housekeeper", "housekeeping_supervisor", "housekeeping_manager"],
    "Food & Beverage": ["server", "bartender", "fnb_supervisor", "fnb_manager"],
    "Maintenance": ["maintenance_technician", "maintenance_supervisor", "maintenance_manager"],
    "Activities": ["activity_guide", "activities_supervisor", "activities_manager"],
    "Management": ["assistant_manager", "general_manager"],
}

LEGACY_ROLES = ["staff", "manager", "admin"]


def _supervisor(manage_bookings=False, manage_rooms=False, manage_guests=False, manage_staff=True):
    return UserPermissions(
        canManageStaff=manage_staff, canManageBookings=manage_bookings,
        canManageRooms=manage_rooms, canManageGuests=manage_guests,
        canViewReports=True, canManageAttendance=True,
    )


ROLE_PERMISSIONS: Dict[str, UserPermissions] = {
    # Front Desk
    "front_desk_agent": UserPermissions(canManageBookings=True, canManageGuests=True),
    "front_desk_supervisor": _supervisor(manage_bookings=True, manage_rooms=True,
                                         manage_guests=True, manage_staff=False),
    "front_desk_manager": ALL_PERMISSIONS,
    # Housekeeping
    "housekeeper": UserPermissions(canManageRooms=True),
    "housekeeping_supervisor": _supervisor(manage_rooms=True),
    "housekeeping_manager": ALL_PERMISSIONS,
    # Food & Beverage
    "server": UserPermissions(canManageGuests=True),
    "bartender": UserPermissions(canManageGuests=True),
    "fnb_supervisor": _supervisor(manage_guests=True),
    "fnb_manager": ALL_PERMISSIONS,
    # Maintenance
    "maintenance_technician": UserPermissions(canManageRooms=True),
    "maintenance_supervisor": _supervisor(manage_rooms=True),
    "maintenance_manager": ALL_PERMISSIONS,
    # Activities
    "activity_guide": UserPermissions(canManageGuests=True),
    "activities_supervisor": _supervisor(manage_guests=True),
    "activities_manager": ALL_PERMISSIONS,
    # Management
    "general_manager": ALL_PERMISSIONS,
    "assistant_manager": ALL_PERMISSIONS,
    # Legacy
    "staff": NO_PERMISSIONS,
    "manager": ALL_PERMISSIONS,
    "admin": ALL_PERMISSIONS,
}

MANAGER_ROLES = {
    "manager", "admin", "front_desk_manager", "housekeeping_manager", "fnb_manager",
    "maintenance_manager", "activities_manager", "general_manager", "assistant_manager",
}

SUPERVISOR_ROLES = {
    "front_desk_supervisor", "housekeeping_supervisor", "fnb_supervisor",
    "maintenance_supervisor", "activities_supervisor",
}

ROLE_LEVELS: Dict[str, int] = {
    **{role: 1 for role in (
        "staff", "housekeeper", "server", "bartender", "maintenance_technician",
        "activity_guide", "front_desk_agent",
    )},
    **{role: 2 for role in SUPERVISOR_ROLES},
    **{role: 3 for role in MANAGER_ROLES - {"admin"}},
    "general_manager": 4,
    "admin": 4,
}


def is_known_role(role: str) -> bool:
    return role in ROLE_PERMISSIONS


def get_permissions(role: str) -> UserPermissions:
    """Permissions of a role; unknown roles get none"""
    return ROLE_PERMISSIONS.get(role, NO_PERMISSIONS)


def has_permission(role: str, permission: str) -> bool:
    return bool(getattr(get_permissions(role), permission, False))


def is_manager_or_above(role: str) -> bool:
    return role in MANAGER_ROLES


def is_supervisor(role: str) -> bool:
    return role in SUPERVISOR_ROLES


def get_role_level(role: str) -> int:
    """Authority level: 1 staff, 2 supervisor, 3 manager, 4 top; 0 unknown"""
    return ROLE_LEVELS.get(role, 0)


def is_role_higher_or_equal(role1: str, role2: str) -> bool:
    return get_role_level(role1) >= get_role_level(role2)
