# ticketlog/user/services.py
import logging

from sqlalchemy.orm import Session
from ticketlog.auth.models import UserSession
from ticketlog.auth.roles import Role
from ticketlog.core.security import hash_password
from ticketlog.user.models import User
from ticketlog.user.schemas import AdminUserUpdate

logger = logging.getLogger(__name__)


def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def create_user(
    db: Session,
    *,
    username: str,
    password: str,
    full_name: str | None,
    phone: str | None,
    role: Role,
    photo: str,
) -> User:
    db_user = User(
        username=username,
        password=hash_password(password),
        full_name=full_name,
        phone=phone,
        role=role,
        photo=photo,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Registered user %s with role %s", username, role.value)
    return db_user


def update_profile(
    db: Session,
    db_user: User,
    *,
    phone: str | None = None,
    new_password: str | None = None,
    photo: str | None = None,
) -> User:
    if phone:
        db_user.phone = phone
    if new_password:
        db_user.password = hash_password(new_password)
    if photo:
        db_user.photo = photo
    db.commit()
    db.refresh(db_user)
    return db_user


def admin_update_user(db: Session, db_user: User, payload: AdminUserUpdate) -> User:
    if payload.full_name:
        db_user.full_name = payload.full_name
    if payload.phone:
        db_user.phone = payload.phone
    if payload.role is not None and payload.role is not db_user.role:
        logger.info("Role of %s changed %s -> %s", db_user.username, db_user.role.value, payload.role.value)
        db_user.role = payload.role
    if payload.password:
        db_user.password = hash_password(payload.password)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_role(db: Session, db_user: User, role: Role) -> User:
    logger.info("Role of %s changed %s -> %s", db_user.username, db_user.role.value, role.value)
    db_user.role = role
    db.commit()
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, db_user: User) -> None:
    db.query(UserSession).filter(UserSession.username == db_user.username).delete(
        synchronize_session=False
    )
    db.delete(db_user)
    db.commit()
    logger.info("Deleted user %s", db_user.username)
