# ticketlog/auth/identity.py
from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from ticketlog.auth.models import UserSession
from ticketlog.auth.roles import Role
from ticketlog.core.config import Settings, get_settings
from ticketlog.core.database import get_db, utcnow
from ticketlog.user.models import User


class Identity(BaseModel):
    """The authenticated caller. Anonymous callers are represented by ``None``."""

    model_config = ConfigDict(frozen=True)

    username: str
    role: Role


def resolve_identity(db: Session, token: str | None) -> Identity | None:
    if not token:
        return None
    row = (
        db.query(UserSession, User.role)
        .join(User, User.username == UserSession.username)
        .filter(UserSession.token == token)
        .first()
    )
    if row is None:
        return None
    session, role = row
    if session.expires_at <= utcnow():
        return None
    return Identity(username=session.username, role=role)


def get_identity(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Identity | None:
    return resolve_identity(db, request.cookies.get(settings.SESSION_COOKIE_NAME))
