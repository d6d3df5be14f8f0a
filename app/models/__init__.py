from app.models.entities import (
    TicketStatus, User, UserSession, Enrollment, Address,
    TicketType, Ticket, Hotel, Room
)

__all__ = [
    'TicketStatus', 'User', 'UserSession', 'Enrollment', 'Address',
    'TicketType', 'Ticket', 'Hotel', 'Room'
]
