from evtracker.schemas.base import CamelModel
from evtracker.schemas.user import UserOut


class SessionUser(CamelModel):
    id: int
    email: str
    name: str
    role: str


class LoginOut(CamelModel):
    success: bool = True
    message: str = "Login successful"
    user: UserOut


class RegisterOut(CamelModel):
    success: bool = True
    message: str = "User registered successfully"
    user: UserOut
    registered_by: SessionUser


class VerifyOut(CamelModel):
    authenticated: bool = True
    user: SessionUser


class OkOut(CamelModel):
    success: bool = True
    message: str | None = None
