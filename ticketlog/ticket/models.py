# ticketlog/ticket/models.py
import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from ticketlog.core.database import Base, utcnow


class TicketStatus(str, enum.Enum):
    TERLAPOR = "Terlapor"
    DIKERJAKAN = "Dikerjakan"
    PENDING = "Pending"
    SELESAI = "Selesai"


def _status_column(**kwargs):
    return Column(
        Enum(
            TicketStatus,
            name="ticket_status",
            native_enum=False,
            length=20,
            validate_strings=True,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        **kwargs,
    )


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    aktifitas = Column(Text, nullable=False)
    sub_node = Column(String(255), nullable=True)
    odc = Column(String(255), nullable=True)
    lokasi = Column(String(255), nullable=True)
    pic = Column(String(255), nullable=True)
    priority = Column(String(50), nullable=True)
    status = _status_column(default=TicketStatus.TERLAPOR, index=True, nullable=False)
    info = Column(Text, nullable=True)
    evidence = Column(String(512), nullable=True)
    created_by = Column(String(255), index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    history = relationship(
        "TicketStatusHistory",
        back_populates="ticket",
        cascade="all, delete-orphan",
    )


class TicketStatusHistory(Base):
    __tablename__ = "ticket_status_history"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id", ondelete="CASCADE"), index=True, nullable=False)
    old_status = _status_column(nullable=True)
    new_status = _status_column(nullable=False)
    changed_by = Column(String(255), nullable=False)
    changed_at = Column(DateTime, default=utcnow, nullable=False)

    ticket = relationship("Ticket", back_populates="history")
