# permissions.py
"""
Access control for the tracker.

- current_identity()   -- who is calling: username + admin flag.
- admin_required       -- decorator for admin-only routes (401 / 403).
- resolve_list_scope() -- owner scope for list/report reads (viewMode handling).
- record_scope()       -- owner scope for single-record task operations.

Non-admins are always pinned to their own records. A foreign record looks
exactly like a missing one (404), never like a forbidden one.
"""

from dataclasses import dataclass
from functools import wraps

from flask_login import current_user, login_required

from errors import Forbidden, Unauthorized, ValidationError

VIEW_SELF = "self"
VIEW_USER = "user"
VIEW_ALL = "all"
VIEW_MODES = (VIEW_SELF, VIEW_USER, VIEW_ALL)


@dataclass(frozen=True)
class Identity:
    username: str
    is_admin: bool = False


def current_identity() -> Identity:
    if not current_user or not current_user.is_authenticated:
        raise Unauthorized()
    return Identity(
        username=current_user.username,
        is_admin=bool(getattr(current_user, "is_admin", False)),
    )


# ----------------------------- DECORATOR ----------------------------- #
def admin_required(view_func):
    """
    Restrict a route to admins.
    - not logged in -> 401 (Flask-Login unauthorized handler)
    - logged in without the admin flag -> 403
    """

    @wraps(view_func)
    @login_required
    def wrapped(*args, **kwargs):
        if not current_identity().is_admin:
            raise Forbidden()
        return view_func(*args, **kwargs)

    return wrapped


# --------------------------- OWNER SCOPING --------------------------- #
def resolve_list_scope(store, identity: Identity, view_mode: str | None, view_user: str | None):
    """Pick the scope a list read runs in.

    Admins choose with ``viewMode``: ``self`` (default), ``user`` with an
    explicit ``viewUser``, or ``all``. Everyone else gets their own records,
    whatever they ask for.
    """
    if not identity.is_admin:
        return store.scoped_to(identity.username)

    mode = (view_mode or VIEW_SELF).strip()
    if mode not in VIEW_MODES:
        raise ValidationError(f"viewMode must be one of: {', '.join(VIEW_MODES)}")
    if mode == VIEW_ALL:
        return store.unscoped()
    if mode == VIEW_USER:
        target = (view_user or "").strip()
        if not target:
            raise ValidationError("viewUser is required when viewMode is 'user'")
        return store.scoped_to(target)
    return store.scoped_to(identity.username)


def record_scope(store, identity: Identity):
    """Single-record operations: admins reach any owner, others only themselves."""
    if identity.is_admin:
        return store.unscoped()
    return store.scoped_to(identity.username)


def task_owner_for_create(identity: Identity, requested_owner) -> str:
    """Admins may file a task on behalf of another user; others cannot."""
    if identity.is_admin and isinstance(requested_owner, str) and requested_owner.strip():
        return requested_owner.strip()
    return identity.username
