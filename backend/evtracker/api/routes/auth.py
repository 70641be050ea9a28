import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from evtracker.api.deps import db, current_user
from evtracker.core.errors import AuthenticationError
from evtracker.schemas.auth import AuthClaims, LoginIn
from evtracker.schemas.session import LoginOut, OkOut, RegisterOut, SessionUser, VerifyOut
from evtracker.schemas.user import UserCreate, UserOut
from evtracker.services.users import authenticate, create_user

log = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_user(u: AuthClaims) -> SessionUser:
    return SessionUser(id=u.user_id, email=u.email, name=u.name, role=u.role)


def _set_auth_cookie(request: Request, response: Response, token: str) -> None:
    st = request.app.state.settings
    response.set_cookie(
        key=st.auth_cookie_name,
        value=token,
        max_age=request.app.state.tokens.max_age_seconds,
        path="/",
        httponly=True,
        secure=st.cookie_secure,
        samesite="lax",
    )


@router.post("/login", response_model=LoginOut)
def login(body: LoginIn, request: Request, response: Response, s: Session = Depends(db)):
    u = authenticate(s, body.email, body.password)
    if u is None:
        log.warning("login failed for %s", body.email)
        raise AuthenticationError("Invalid email or password")
    _set_auth_cookie(request, response, request.app.state.tokens.issue(u))
    log.info("login ok for %s", u.email)
    return LoginOut(user=UserOut.model_validate(u))


@router.post("/register", response_model=RegisterOut, status_code=201)
def register(body: UserCreate, s: Session = Depends(db), me: AuthClaims = Depends(current_user)):
    user = create_user(s, email=body.email, password=body.password, name=body.name, role=body.role)
    log.info("user %s registered by %s", user.email, me.email)
    return RegisterOut(user=UserOut.model_validate(user), registered_by=_session_user(me))


@router.get("/verify", response_model=VerifyOut)
def verify(request: Request):
    token = request.cookies.get(request.app.state.settings.auth_cookie_name)
    if not token:
        return JSONResponse(status_code=401, content={"error": "No token provided", "authenticated": False})
    claims = request.app.state.tokens.verify(token)
    if claims is None:
        return JSONResponse(status_code=401, content={"error": "Invalid token", "authenticated": False})
    return VerifyOut(user=_session_user(claims))


@router.post("/logout", response_model=OkOut)
def logout(request: Request, response: Response):
    st = request.app.state.settings
    response.delete_cookie(
        key=st.auth_cookie_name,
        path="/",
        httponly=True,
        secure=st.cookie_secure,
        samesite="lax",
    )
    return OkOut(message="Logged out")
