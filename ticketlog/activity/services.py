# ticketlog/activity/services.py
from sqlalchemy.orm import Session
from ticketlog.activity.models import Activity
from ticketlog.activity.schemas import ActivityCreate
from ticketlog.core.database import utcnow


def get_activities(db: Session, username: str | None = None) -> list[Activity]:
    query = db.query(Activity)
    if username is not None:
        query = query.filter(Activity.username == username)
    return query.order_by(Activity.date.desc(), Activity.id.desc()).all()


def get_activity(db: Session, activity_id: int) -> Activity | None:
    return db.query(Activity).filter(Activity.id == activity_id).first()


def create_activity(db: Session, payload: ActivityCreate) -> Activity:
    db_activity = Activity(**payload.model_dump(), date=utcnow())
    db.add(db_activity)
    db.commit()
    db.refresh(db_activity)
    return db_activity


def delete_activity(db: Session, db_activity: Activity) -> None:
    db.delete(db_activity)
    db.commit()
