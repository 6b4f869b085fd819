# ticketlog/auth/routes.py
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, Response, UploadFile
from pydantic import StringConstraints
from sqlalchemy.orm import Session

from ticketlog.auth import services as auth_service
from ticketlog.auth.identity import Identity, get_identity
from ticketlog.auth.policy import is_admin
from ticketlog.auth.roles import Role, landing_page
from ticketlog.auth.schemas import LoginRequest, LoginResponse, RedirectMessage
from ticketlog.core.config import Settings, get_settings
from ticketlog.core.database import get_db
from ticketlog.core.uploads import save_upload
from ticketlog.user import services as user_service

router = APIRouter(tags=["Auth"])

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3)]
Password = Annotated[str, StringConstraints(min_length=6)]


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = auth_service.authenticate(db, payload.username.strip(), payload.password)
    if not user:
        raise HTTPException(status_code=401, detail="Login failed: Invalid username or password")

    session = auth_service.create_session(db, user, settings.SESSION_MAX_AGE)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.token,
        max_age=settings.SESSION_MAX_AGE,
        httponly=True,
        samesite="strict",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return {"message": "Login successful", "redirect": landing_page(user.role), "user": user}


@router.post("/logout", response_model=RedirectMessage)
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    auth_service.destroy_session(db, request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logout successful", "redirect": "/index.html"}


@router.post("/register", response_model=RedirectMessage, status_code=201)
def register(
    username: Username = Form(...),
    password: Password = Form(...),
    full_name: str | None = Form(None, alias="fullName"),
    phone: str | None = Form(None),
    role: Role | None = Form(None),
    photo: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    identity: Identity | None = Depends(get_identity),
    settings: Settings = Depends(get_settings),
):
    role = role or Role.TEKNISI
    if role is not Role.TEKNISI and not is_admin(identity):
        raise HTTPException(status_code=403, detail="Forbidden: Owner access required to assign roles")
    if user_service.get_user(db, username):
        raise HTTPException(status_code=400, detail="Username already exists")

    photo_path = save_upload(photo) if photo is not None and photo.filename else settings.DEFAULT_PHOTO
    user_service.create_user(
        db,
        username=username,
        password=password,
        full_name=full_name.strip() if full_name else None,
        phone=phone.strip() if phone else None,
        role=role,
        photo=photo_path,
    )
    return {"message": "Account created successfully", "redirect": "/index.html"}
