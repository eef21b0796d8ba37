"""
Tests for resort/security/permissions.py
"""
import pytest

from resort.security.permissions import (
    MANAGE_BOOKINGS, MANAGE_ROOMS, MANAGE_STAFF, ACCESS_ALL_DEPARTMENTS, DEPARTMENT_ROLES,
    ROLE_PERMISSIONS, get_permissions, has_permission, is_known_role, is_manager_or_above,
    is_supervisor, get_role_level, is_role_higher_or_equal
)


def test_every_department_role_has_permissions():
    for roles in DEPARTMENT_ROLES.values():
        for role in roles:
            assert role in ROLE_PERMISSIONS


def test_unknown_role_has_nothing():
    assert not any(get_permissions("captain").as_dict().values())
    assert is_known_role("captain") is False


def test_permission_dict_uses_wire_names():
    perms = get_permissions("front_desk_agent").as_dict()
    assert perms[MANAGE_BOOKINGS] is True
    assert perms[MANAGE_ROOMS] is False


@pytest.mark.parametrize("role, permission, expected", [
    ("housekeeper", MANAGE_ROOMS, True),
    ("housekeeper", MANAGE_BOOKINGS, False),
    ("housekeeping_supervisor", MANAGE_STAFF, True),
    ("front_desk_supervisor", MANAGE_STAFF, False),
    ("general_manager", ACCESS_ALL_DEPARTMENTS, True),
    ("staff", MANAGE_BOOKINGS, False),
])
def test_has_permission(role, permission, expected):
    assert has_permission(role, permission) is expected


def test_role_tiers():
    assert is_manager_or_above("fnb_manager")
    assert not is_manager_or_above("fnb_supervisor")
    assert is_supervisor("fnb_supervisor")
    assert not is_supervisor("server")


@pytest.mark.parametrize("role, level", [
    ("server", 1), ("staff", 1), ("maintenance_supervisor", 2), ("manager", 3),
    ("general_manager", 4), ("admin", 4), ("captain", 0),
])
def test_role_level(role, level):
    assert get_role_level(role) == level


def test_role_comparison():
    assert is_role_higher_or_equal("activities_manager", "activity_guide")
    assert is_role_higher_or_equal("housekeeper", "server")
    assert not is_role_higher_or_equal("bartender", "fnb_supervisor")
