# ticketlog/auth/schemas.py
from ticketlog.core.schemas import CamelModel
from ticketlog.user.schemas import UserOut


class LoginRequest(CamelModel):
    username: str
    password: str


class LoginResponse(CamelModel):
    message: str
    redirect: str
    user: UserOut


class RedirectMessage(CamelModel):
    message: str
    redirect: str
