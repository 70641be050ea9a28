import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from evtracker.api.deps import db, require_admin, RecordId
from evtracker.core.errors import ConflictError, NotFoundError
from evtracker.schemas.auth import AuthClaims
from evtracker.schemas.session import OkOut
from evtracker.schemas.user import UserUpdate, UserOut
from evtracker.services import users as store

log = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _require_user(s: Session, user_id: int):
    user = store.get_user(s, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.get("", response_model=list[UserOut])
def list_users(s: Session = Depends(db), admin: AuthClaims = Depends(require_admin)):
    return [UserOut.model_validate(x) for x in store.list_users(s)]


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: RecordId, body: UserUpdate, s: Session = Depends(db), admin: AuthClaims = Depends(require_admin)):
    user = _require_user(s, user_id)
    user = store.update_user(
        s,
        user,
        email=body.email,
        name=body.name,
        role=body.role,
        password=body.password,
    )
    return UserOut.model_validate(user)


@router.delete("/{user_id}", response_model=OkOut)
def delete_user(user_id: RecordId, s: Session = Depends(db), admin: AuthClaims = Depends(require_admin)):
    user = _require_user(s, user_id)
    if user.id == admin.user_id:
        raise ConflictError("Cannot delete your own account")
    email = user.email
    store.delete_user(s, user)
    log.info("user %s deleted by %s", email, admin.email)
    return OkOut(message="User deleted successfully")
