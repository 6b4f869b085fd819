# ticketlog/ticket/schemas.py
from datetime import datetime

from ticketlog.core.schemas import CamelModel
from ticketlog.ticket.models import TicketStatus


class TicketBase(CamelModel):
    aktifitas: str
    sub_node: str | None = None
    odc: str | None = None
    lokasi: str | None = None
    pic: str | None = None
    priority: str | None = None
    info: str | None = None


class TicketCreate(TicketBase):
    status: TicketStatus | None = None
    created_by: str
    created_at: datetime | None = None
    evidence: str | None = None


class TicketUpdate(CamelModel):
    aktifitas: str | None = None
    sub_node: str | None = None
    odc: str | None = None
    lokasi: str | None = None
    pic: str | None = None
    priority: str | None = None
    status: TicketStatus | None = None
    info: str | None = None
    evidence: str | None = None


class TicketOut(TicketBase):
    id: int
    status: TicketStatus
    evidence: str | None = None
    created_by: str
    created_at: datetime


class TicketMessage(CamelModel):
    message: str
    ticket: TicketOut


class TicketHistoryOut(CamelModel):
    id: int
    ticket_id: int
    old_status: TicketStatus | None = None
    new_status: TicketStatus
    changed_by: str
    changed_at: datetime
