# ticketlog/setting/routes.py
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session
from ticketlog.auth.identity import Identity
from ticketlog.auth.policy import admin_identity
from ticketlog.core.config import Settings, get_settings
from ticketlog.core.database import get_db
from ticketlog.core.uploads import save_upload
from ticketlog.setting import services as setting_service
from ticketlog.setting.schemas import CompanyLogo, CompanyLogoMessage, CompanyName, CompanyNameMessage

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("/company-name", response_model=CompanyName)
def get_company_name(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    name = setting_service.get_setting(db, setting_service.COMPANY_NAME)
    return {"company_name": name or settings.DEFAULT_COMPANY_NAME}


@router.post("/company-name", response_model=CompanyNameMessage)
def update_company_name(
    payload: CompanyName,
    db: Session = Depends(get_db),
    identity: Identity = Depends(admin_identity),
):
    name = payload.company_name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Company name cannot be empty")
    setting_service.set_setting(db, setting_service.COMPANY_NAME, name)
    return {"message": "Company name updated successfully", "company_name": name}


@router.get("/company-logo", response_model=CompanyLogo)
def get_company_logo(db: Session = Depends(get_db)):
    return {"logo_url": setting_service.get_setting(db, setting_service.COMPANY_LOGO)}


@router.post("/company-logo", response_model=CompanyLogoMessage)
def update_company_logo(
    logo: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    identity: Identity = Depends(admin_identity),
):
    if logo is None or not logo.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    logo_url = save_upload(logo)
    setting_service.set_setting(db, setting_service.COMPANY_LOGO, logo_url)
    return {"message": "Company logo updated successfully", "logo_url": logo_url}
