import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from evtracker.core.errors import ConflictError
from evtracker.core.security import hash_password, verify_password
from evtracker.models.user import User

log = logging.getLogger(__name__)


def find_user_by_email(s: Session, email: str) -> User | None:
    return s.execute(select(User).where(User.email == email.strip().lower())).scalar_one_or_none()


def get_user(s: Session, user_id: int) -> User | None:
    return s.execute(select(User).where(User.id == user_id)).scalar_one_or_none()


def list_users(s: Session) -> list[User]:
    return s.execute(select(User).order_by(User.created_at.desc(), User.id.desc())).scalars().all()


def authenticate(s: Session, email: str, password: str) -> User | None:
    u = find_user_by_email(s, email)
    if u is None or not verify_password(password, u.password_hash):
        return None
    return u


def _commit_unique(s: Session, user: User) -> User:
    try:
        s.commit()
    except IntegrityError:
        s.rollback()
        raise ConflictError("User with this email already exists")
    s.refresh(user)
    return user


def create_user(s: Session, email: str, password: str, name: str, role: str = "user") -> User:
    email = email.strip().lower()
    if find_user_by_email(s, email) is not None:
        raise ConflictError("User with this email already exists")
    user = User(email=email, password_hash=hash_password(password), name=name, role=role)
    s.add(user)
    return _commit_unique(s, user)


def update_user(
    s: Session,
    user: User,
    email: str | None = None,
    name: str | None = None,
    role: str | None = None,
    password: str | None = None,
) -> User:
    if email is not None and email != user.email:
        other = find_user_by_email(s, email)
        if other is not None and other.id != user.id:
            raise ConflictError("User with this email already exists")
        user.email = email.strip().lower()
    if name is not None:
        user.name = name
    if role is not None:
        user.role = role
    if password is not None:
        user.password_hash = hash_password(password)
    s.add(user)
    return _commit_unique(s, user)


def delete_user(s: Session, user: User) -> None:
    s.delete(user)
    s.commit()
