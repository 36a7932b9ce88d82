"""
Capability checks on an authenticated caller.

These are plain functions so they can be tested without a request; the
FastAPI dependencies in app.core.deps translate a False result into 403.
"""


def is_admin(caller_is_admin: bool) -> bool:
    return bool(caller_is_admin)


def is_self_or_admin(caller_username: str, target_username: str, caller_is_admin: bool) -> bool:
    """Allow a user to act on their own account, or an admin on any account."""
    return is_admin(caller_is_admin) or caller_username == target_username
