# ticketlog/user/routes.py
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from ticketlog.auth.identity import Identity
from ticketlog.auth.policy import (
    admin_identity,
    can_access,
    current_identity,
    ensure_self,
    privileged_identity,
)
from ticketlog.core.database import get_db
from ticketlog.core.schemas import Message
from ticketlog.core.security import verify_password
from ticketlog.core.uploads import save_upload
from ticketlog.user import services as user_service
from ticketlog.user.schemas import AdminUserUpdate, RoleUpdate, UserMessage, UserOut

router = APIRouter(tags=["Users"])


def _get_or_404(db: Session, username: str):
    user = user_service.get_user(db, username)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/users", response_model=list[UserOut])
def list_all(
    db: Session = Depends(get_db),
    identity: Identity = Depends(privileged_identity),
):
    return user_service.get_all_users(db)


@router.get("/users/{username}", response_model=UserOut)
def get(
    username: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    # the path itself names the owner, so no lookup is needed before the check
    if not can_access(identity, username):
        raise HTTPException(status_code=403, detail="Forbidden")
    return _get_or_404(db, username)


@router.delete("/users/{username}", response_model=Message)
def delete(
    username: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(admin_identity),
):
    user_service.delete_user(db, _get_or_404(db, username))
    return {"message": "User deleted successfully"}


@router.post("/update-profile", response_model=UserMessage)
def update_profile(
    username: str = Form(...),
    current_password: str = Form(..., alias="currentPassword"),
    new_password: str | None = Form(None, alias="newPassword", min_length=6),
    phone: str | None = Form(None),
    photo: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ensure_self(identity, username, "Forbidden: Cannot update other users profile")
    user = _get_or_404(db, username)
    if not verify_password(current_password, user.password):
        raise HTTPException(status_code=401, detail="Incorrect current password")

    photo_path = save_upload(photo) if photo is not None and photo.filename else None
    updated = user_service.update_profile(
        db, user, phone=phone, new_password=new_password, photo=photo_path
    )
    return {"message": "Profile updated successfully", "user": updated}


@router.post("/admin/users/update", response_model=Message)
def admin_update(
    payload: AdminUserUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(admin_identity),
):
    user = _get_or_404(db, payload.original_username)
    user_service.admin_update_user(db, user, payload)
    return {"message": "User updated successfully"}


@router.post("/update-role", response_model=Message)
def update_role(
    payload: RoleUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(admin_identity),
):
    user = _get_or_404(db, payload.username)
    user_service.update_role(db, user, payload.new_role)
    return {"message": "Role updated successfully"}
