from typing import Annotated

from fastapi import Depends, Path, Request

from evtracker.core.errors import AuthenticationError, AuthorizationError
from evtracker.schemas.auth import AuthClaims
from evtracker.schemas.base import MAX_ID

RecordId = Annotated[int, Path(ge=1, le=MAX_ID)]


def db(request: Request):
    s = request.app.state.session_factory()
    try:
        yield s
    finally:
        s.close()


def current_user(request: Request) -> AuthClaims:
    token = request.cookies.get(request.app.state.settings.auth_cookie_name)
    if not token:
        raise AuthenticationError("Authentication required")
    claims = request.app.state.tokens.verify(token)
    if claims is None:
        raise AuthenticationError("Invalid token")
    return claims


def require_admin(u: AuthClaims = Depends(current_user)) -> AuthClaims:
    if not u.is_admin:
        raise AuthorizationError("Admin access required")
    return u
