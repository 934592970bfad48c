"""Caller roles used for access control."""

ROLE_USER = "user"
ROLE_ADMIN = "admin"

ROLES = frozenset({ROLE_USER, ROLE_ADMIN})


def is_valid_role(role: object) -> bool:
    """Return True if role is one of the recognized role strings."""
    return isinstance(role, str) and role in ROLES
