# ticketlog/auth/services.py
import logging
import secrets
from datetime import timedelta

from sqlalchemy.orm import Session
from ticketlog.auth.models import UserSession
from ticketlog.core.database import utcnow
from ticketlog.core.security import verify_password
from ticketlog.user.models import User

logger = logging.getLogger(__name__)


def authenticate(db: Session, username: str, password: str) -> User | None:
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.password):
        logger.warning("Failed login for %r", username)
        return None
    return user


def purge_expired_sessions(db: Session) -> int:
    return (
        db.query(UserSession)
        .filter(UserSession.expires_at <= utcnow())
        .delete(synchronize_session=False)
    )


def create_session(db: Session, user: User, max_age: int) -> UserSession:
    purge_expired_sessions(db)
    now = utcnow()
    db_session = UserSession(
        token=secrets.token_urlsafe(32),
        username=user.username,
        created_at=now,
        expires_at=now + timedelta(seconds=max_age),
    )
    db.add(db_session)
    db.commit()
    db.refresh(db_session)
    logger.info("User %s logged in", user.username)
    return db_session


def destroy_session(db: Session, token: str | None) -> None:
    if not token:
        return
    deleted = db.query(UserSession).filter(UserSession.token == token).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("Session closed")
