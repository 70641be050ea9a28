import logging
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from evtracker.schemas.auth import AuthClaims

log = logging.getLogger(__name__)

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _bcrypt_safe(p: str) -> str:
    p = str(p)
    b = p.encode("utf-8")
    if len(b) > 72:
        p = b[:72].decode("utf-8", errors="ignore")
    return p


def hash_password(p: str) -> str:
    if p is None:
        raise ValueError("password is required")
    return pwd.hash(_bcrypt_safe(p))


def verify_password(p: str, hashed: str) -> bool:
    if p is None or hashed is None:
        return False
    return pwd.verify(_bcrypt_safe(p), hashed)


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expires_min: int = 10080):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_min = expires_min

    @property
    def max_age_seconds(self) -> int:
        return self.expires_min * 60

    def issue(self, user, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "userId": user.id,
            "email": user.email,
            "name": user.name,
            "role": user.role,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.expires_min)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> AuthClaims | None:
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            log.debug("token rejected: %s", e)
            return None
        try:
            return AuthClaims.model_validate(payload)
        except ValidationError as e:
            log.debug("token payload rejected: %s", e.errors())
            return None
