# ticketlog/activity/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from ticketlog.activity import services as activity_service
from ticketlog.activity.schemas import ActivityCreate, ActivityMessage, ActivityOut
from ticketlog.auth.identity import Identity
from ticketlog.auth.policy import (
    can_access,
    current_identity,
    ensure_self,
    is_owner_or_operator,
    privileged_identity,
)
from ticketlog.core.database import get_db
from ticketlog.core.schemas import Message

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.post("", response_model=ActivityMessage, status_code=201)
def create(
    activity: ActivityCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ensure_self(identity, activity.username, "Forbidden: Cannot log activity for others")
    created = activity_service.create_activity(db, activity)
    return {"message": "Activity logged successfully", "activity": created}


@router.get("", response_model=list[ActivityOut])
def list_all(
    username: str | None = Query(default=None, description="Only this user's activities"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    # without a username the full log is returned, which only privileged roles may read
    allowed = can_access(identity, username) if username else is_owner_or_operator(identity)
    if not allowed:
        raise HTTPException(status_code=403, detail="Forbidden")
    return activity_service.get_activities(db, username or None)


@router.delete("/{activity_id}", response_model=Message)
def delete(
    activity_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(privileged_identity),
):
    activity = activity_service.get_activity(db, activity_id)
    if not activity:
        raise HTTPException(status_code=404, detail="Activity not found")
    activity_service.delete_activity(db, activity)
    return {"message": "Activity deleted successfully"}
