# ticketlog/user/schemas.py
from datetime import datetime
from typing import Annotated

from pydantic import Field

from ticketlog.auth.roles import Role
from ticketlog.core.schemas import CamelModel, NonEmptyStr


class UserOut(CamelModel):
    id: int
    username: str
    full_name: str | None = None
    role: Role
    phone: str | None = None
    photo: str | None = None
    created_at: datetime | None = None


class UserMessage(CamelModel):
    message: str
    user: UserOut


class AdminUserUpdate(CamelModel):
    original_username: NonEmptyStr
    full_name: str | None = None
    password: Annotated[str, Field(min_length=6)] | None = None
    phone: str | None = None
    role: Role | None = None


class RoleUpdate(CamelModel):
    username: NonEmptyStr
    new_role: Role
