from pydantic import field_validator
from datetime import datetime

from evtracker.schemas.auth import Role, normalize_email
from evtracker.schemas.base import CamelModel


def _name_trim(v: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError("Name is required")
    if len(v) > 128:
        raise ValueError("Name is too long")
    return v


def _password_min(v: str) -> str:
    v = str(v)
    if len(v) < 6:
        raise ValueError("Password must be at least 6 characters long")
    return v


class UserCreate(CamelModel):
    email: str
    password: str
    name: str
    role: Role = "user"

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str):
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def password_min(cls, v: str):
        return _password_min(v)

    @field_validator("name")
    @classmethod
    def name_trim(cls, v: str):
        return _name_trim(v)

    @field_validator("role", mode="before")
    @classmethod
    def role_normalize(cls, v):
        if v is None:
            return "user"
        return str(v).strip().lower()


class UserUpdate(CamelModel):
    email: str | None = None
    name: str | None = None
    role: Role | None = None
    password: str | None = None

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str | None):
        if v is None:
            return None
        return normalize_email(v)

    @field_validator("name")
    @classmethod
    def name_trim(cls, v: str | None):
        if v is None:
            return None
        return _name_trim(v)

    @field_validator("role", mode="before")
    @classmethod
    def role_normalize(cls, v):
        if v is None:
            return None
        return str(v).strip().lower()

    @field_validator("password")
    @classmethod
    def password_min(cls, v: str | None):
        if v is None:
            return None
        return _password_min(v)


class UserOut(CamelModel):
    id: int
    email: str
    name: str
    role: str
    created_at: datetime | None = None


class UserRef(CamelModel):
    id: int
    name: str
    email: str
