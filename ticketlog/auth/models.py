# ticketlog/auth/models.py
from sqlalchemy import Column, DateTime, String
from ticketlog.core.database import Base, utcnow


class UserSession(Base):
    __tablename__ = "sessions"

    token = Column(String(128), primary_key=True)
    username = Column(String(255), index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime, index=True, nullable=False)
