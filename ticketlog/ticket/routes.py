# ticketlog/ticket/routes.py
from datetime import datetime

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session
from ticketlog.auth.identity import Identity
from ticketlog.auth.policy import current_identity, ensure_can_access, ensure_self
from ticketlog.core.database import get_db
from ticketlog.core.schemas import Message, NonEmptyStr
from ticketlog.core.uploads import save_upload
from ticketlog.ticket import services as ticket_service
from ticketlog.ticket.models import Ticket, TicketStatus
from ticketlog.ticket.schemas import (
    TicketCreate,
    TicketHistoryOut,
    TicketMessage,
    TicketOut,
    TicketUpdate,
)

router = APIRouter(prefix="/tickets", tags=["Tickets"])


def _get_or_404(db: Session, ticket_id: int) -> Ticket:
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


def _stored_upload(upload: UploadFile | None) -> str | None:
    if upload is None or not upload.filename:
        return None
    return save_upload(upload)


@router.post("", response_model=TicketMessage, status_code=201)
def create(
    aktifitas: NonEmptyStr = Form(...),
    sub_node: str | None = Form(None, alias="subNode"),
    odc: str | None = Form(None),
    lokasi: str | None = Form(None),
    pic: str | None = Form(None),
    priority: str | None = Form(None),
    status: TicketStatus | None = Form(None),
    info: str | None = Form(None),
    created_by: str = Form(..., alias="createdBy"),
    created_at: datetime | None = Form(None, alias="createdAt"),
    evidence: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ensure_self(identity, created_by, "Forbidden: Invalid creator")
    payload = TicketCreate(
        aktifitas=aktifitas,
        sub_node=sub_node,
        odc=odc,
        lokasi=lokasi,
        pic=pic,
        priority=priority,
        status=status,
        info=info,
        created_by=created_by,
        created_at=created_at,
        evidence=_stored_upload(evidence),
    )
    ticket = ticket_service.create_ticket(db, payload)
    return {"message": "Ticket created successfully", "ticket": ticket}


@router.get("", response_model=list[TicketOut])
def list_all(
    status: TicketStatus | None = Query(default=None, description="Filter by status"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    # every authenticated user sees the full list; instance routes are ownership-checked
    return ticket_service.get_all_tickets(db, status)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(
    ticket_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ticket = _get_or_404(db, ticket_id)
    ensure_can_access(identity, ticket.created_by, "view this ticket")
    return ticket


@router.get("/{ticket_id}/history", response_model=list[TicketHistoryOut])
def history(
    ticket_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ticket = _get_or_404(db, ticket_id)
    ensure_can_access(identity, ticket.created_by, "view this ticket")
    return ticket_service.get_history(db, ticket.id)


@router.post("/{ticket_id}/update", response_model=TicketMessage)
def update(
    ticket_id: int,
    aktifitas: str | None = Form(None),
    sub_node: str | None = Form(None, alias="subNode"),
    odc: str | None = Form(None),
    lokasi: str | None = Form(None),
    pic: str | None = Form(None),
    priority: str | None = Form(None),
    status: TicketStatus | None = Form(None),
    info: str | None = Form(None),
    evidence: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ticket = _get_or_404(db, ticket_id)
    ensure_can_access(identity, ticket.created_by, "edit this ticket")

    payload = TicketUpdate(
        aktifitas=aktifitas.strip() if aktifitas and aktifitas.strip() else None,
        sub_node=sub_node,
        odc=odc,
        lokasi=lokasi,
        pic=pic,
        priority=priority,
        status=status,
        info=info,
        evidence=_stored_upload(evidence),
    )
    updated = ticket_service.update_ticket(db, ticket, payload, changed_by=identity.username)
    return {"message": "Ticket updated successfully", "ticket": updated}


@router.delete("/{ticket_id}", response_model=Message)
def delete(
    ticket_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(current_identity),
):
    ticket = _get_or_404(db, ticket_id)
    ensure_can_access(identity, ticket.created_by, "delete this ticket")
    ticket_service.delete_ticket(db, ticket)
    return {"message": "Ticket deleted successfully"}
