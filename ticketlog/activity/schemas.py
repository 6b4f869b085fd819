# ticketlog/activity/schemas.py
from datetime import datetime

from ticketlog.core.schemas import CamelModel, NonEmptyStr


class ActivityCreate(CamelModel):
    description: NonEmptyStr
    username: NonEmptyStr


class ActivityOut(CamelModel):
    id: int
    description: str
    username: str
    date: datetime


class ActivityMessage(CamelModel):
    message: str
    activity: ActivityOut
