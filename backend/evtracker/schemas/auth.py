import re
from typing import Literal

from pydantic import Field, field_validator

from evtracker.schemas.base import CamelModel

Role = Literal["user", "admin"]

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 255


def normalize_email(v: str) -> str:
    v = (v or "").strip().lower()
    if not v:
        raise ValueError("Email is required")
    if len(v) > MAX_EMAIL_LENGTH:
        raise ValueError("Email is too long")
    if not EMAIL_RE.match(v):
        raise ValueError("Invalid email format")
    return v


class LoginIn(CamelModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str):
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str):
        if not v:
            raise ValueError("Email and password are required")
        return v


class AuthClaims(CamelModel):
    user_id: int = Field(alias="userId")
    email: str
    name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
