from app.repositories.hotels_repository import HotelsRepository
from app.repositories.enrollment_repository import EnrollmentRepository
from app.repositories.ticket_repository import TicketRepository
from app.repositories.session_repository import SessionRepository
from app.repositories.user_repository import UserRepository

__all__ = [
    'HotelsRepository', 'EnrollmentRepository', 'TicketRepository',
    'SessionRepository', 'UserRepository'
]
