# ticketlog/setting/schemas.py
from ticketlog.core.schemas import CamelModel


class CompanyName(CamelModel):
    company_name: str


class CompanyNameMessage(CompanyName):
    message: str


class CompanyLogo(CamelModel):
    logo_url: str | None = None


class CompanyLogoMessage(CompanyLogo):
    message: str
