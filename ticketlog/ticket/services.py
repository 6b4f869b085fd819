# ticketlog/ticket/services.py
import logging

from sqlalchemy.orm import Session
from ticketlog.core.database import utcnow
from ticketlog.ticket.models import Ticket, TicketStatus, TicketStatusHistory
from ticketlog.ticket.schemas import TicketCreate, TicketUpdate

logger = logging.getLogger(__name__)


def get_all_tickets(db: Session, status: TicketStatus | None = None) -> list[Ticket]:
    query = db.query(Ticket)
    if status is not None:
        query = query.filter(Ticket.status == status)
    return query.order_by(Ticket.created_at.desc(), Ticket.id.desc()).all()


def get_ticket(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    data = payload.model_dump()
    data["status"] = data["status"] or TicketStatus.TERLAPOR
    data["created_at"] = data["created_at"] or utcnow()
    db_ticket = Ticket(**data)
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s created by %s", db_ticket.id, db_ticket.created_by)
    return db_ticket


def update_ticket(db: Session, db_ticket: Ticket, payload: TicketUpdate, changed_by: str) -> Ticket:
    """Apply the non-empty fields of ``payload``; a status change is recorded in the history."""
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    old_status = db_ticket.status
    new_status = changes.get("status")

    for field, value in changes.items():
        setattr(db_ticket, field, value)

    if new_status is not None and old_status is not None and new_status != old_status:
        db.add(
            TicketStatusHistory(
                ticket_id=db_ticket.id,
                old_status=old_status,
                new_status=new_status,
                changed_by=changed_by,
                changed_at=utcnow(),
            )
        )
        logger.info(
            "Ticket %s status %s -> %s by %s",
            db_ticket.id, old_status.value, new_status.value, changed_by,
        )

    db.commit()
    db.refresh(db_ticket)
    return db_ticket


def delete_ticket(db: Session, db_ticket: Ticket) -> None:
    db.delete(db_ticket)
    db.commit()
    logger.info("Ticket %s deleted", db_ticket.id)


def get_history(db: Session, ticket_id: int) -> list[TicketStatusHistory]:
    return (
        db.query(TicketStatusHistory)
        .filter(TicketStatusHistory.ticket_id == ticket_id)
        .order_by(TicketStatusHistory.changed_at.desc(), TicketStatusHistory.id.desc())
        .all()
    )
