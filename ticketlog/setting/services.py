# ticketlog/setting/services.py
import logging

from sqlalchemy.orm import Session
from ticketlog.setting.models import Setting

logger = logging.getLogger(__name__)

COMPANY_NAME = "company_name"
COMPANY_LOGO = "company_logo"


def get_setting(db: Session, key: str) -> str | None:
    row = db.query(Setting).filter(Setting.setting_key == key).first()
    return row.setting_value if row else None


def set_setting(db: Session, key: str, value: str) -> Setting:
    row = db.query(Setting).filter(Setting.setting_key == key).first()
    if row is None:
        row = Setting(setting_key=key)
        db.add(row)
    row.setting_value = value
    db.commit()
    db.refresh(row)
    logger.info("Setting %s updated", key)
    return row
