"""
Ticket repository
"""
from typing import Optional
from sqlalchemy.orm import Session, joinedload

from app.models.entities import Ticket


class TicketRepository:

    def __init__(self, db_session: Session):
        self._db = db_session

    def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """
        Most recent ticket of an enrollment

        Args:
            enrollment_id: Enrollment ID

        Returns:
            The newest Ticket (by creation time, then id) with its ticket type
            loaded, or None
        """
        return (
            self._db.query(Ticket)
            .options(joinedload(Ticket.ticket_type))
            .filter(Ticket.enrollment_id == enrollment_id)
            .order_by(Ticket.created_at.desc(), Ticket.id.desc())
            .first()
        )
