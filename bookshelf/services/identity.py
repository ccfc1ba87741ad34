from flask import current_app, request, session

from bookshelf.errors import IdentityRequired
from bookshelf.parsing import as_non_empty_string


def resolve_user_id(explicit=None):
    """Resolve the caller's user id for the current request.

    Lookup order is the explicit value (body ``user_id``, write paths only),
    the ``X-User-Id`` header, the signed session cookie and the ``userId``
    query parameter. Without any of those the configured anonymous id is
    used, or ``IdentityRequired`` is raised when anonymous use is off.
    """
    candidates = (
        explicit,
        request.headers.get("X-User-Id"),
        session.get("user_id"),
        request.args.get("userId"),
    )
    for candidate in candidates:
        user_id = as_non_empty_string(candidate)
        if user_id:
            return user_id
    if current_app.config.get("ALLOW_ANONYMOUS", False):
        return current_app.config.get("ANONYMOUS_USER_ID", "anonymous")
    raise IdentityRequired("Authentication required")
