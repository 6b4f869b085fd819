# ticketlog/activity/models.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from ticketlog.core.database import Base, utcnow


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(Text, nullable=False)
    username = Column(String(255), index=True, nullable=False)
    date = Column(DateTime, default=utcnow, index=True, nullable=False)
