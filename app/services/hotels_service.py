"""
Hotels service

Gates hotel and room listings behind the enrollment/ticket guard chain:
enrollment exists -> ticket exists and grants hotel access -> ticket is paid.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from app.errors import (
    AppError, ErrorKind, forbidden_error, not_found_error,
    payment_required_error, unauthorized_error,
)
from app.models.entities import Enrollment, Hotel, Ticket, TicketStatus
from app.services.protocols import EnrollmentReader, HotelsRepositoryProtocol, TicketReader

logger = logging.getLogger(__name__)


@dataclass
class AuthorizationResult:
    """
    Outcome of the guard chain

    On success `enrollment` and `ticket` are set; on failure `error` holds the
    AppError of the guard that rejected the user.
    """
    success: bool
    enrollment: Optional[Enrollment] = None
    ticket: Optional[Ticket] = None
    error: Optional[AppError] = None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""

    @staticmethod
    def ok(enrollment: Enrollment, ticket: Ticket) -> "AuthorizationResult":
        return AuthorizationResult(success=True, enrollment=enrollment, ticket=ticket)

    @staticmethod
    def fail(error: AppError) -> "AuthorizationResult":
        return AuthorizationResult(success=False, error=error)

    def raise_for_failure(self) -> None:
        """Raise the guard's AppError when this result is a failure"""
        if not self.success:
            raise self.error


def ticket_grants_hotel(ticket: Optional[Ticket]) -> bool:
    """Whether a ticket's type includes in-person hotel accommodation"""
    if ticket is None or ticket.ticket_type is None:
        return False
    return bool(ticket.ticket_type.includes_hotel) and not ticket.ticket_type.is_remote


def parse_hotel_id(hotel_id: Union[int, str]) -> int:
    """Hotel id as an int; anything that is not an integer matches no hotel"""
    try:
        return int(hotel_id)
    except (TypeError, ValueError):
        raise not_found_error(f"Hotel {hotel_id} not found")


class HotelsService:
    """Hotel and room listings for enrolled users with a paid hotel ticket"""

    def __init__(
        self,
        hotels_repository: HotelsRepositoryProtocol,
        enrollment_repository: EnrollmentReader,
        ticket_repository: TicketReader,
    ):
        self._hotels = hotels_repository
        self._enrollments = enrollment_repository
        self._tickets = ticket_repository

    def resolve_authorization(self, user_id: int) -> AuthorizationResult:
        """
        Run the guard chain for a user

        Args:
            user_id: Authenticated user ID

        Returns:
            AuthorizationResult; failures carry UNAUTHORIZED (no enrollment),
            FORBIDDEN (no ticket, or ticket without in-person hotel) or
            PAYMENT_REQUIRED (ticket not paid)
        """
        enrollment = self._enrollments.find_with_address_by_user_id(user_id)
        if not enrollment:
            logger.info(f"User {user_id} has no enrollment")
            return AuthorizationResult.fail(unauthorized_error("No enrollment for this user"))

        ticket = self._tickets.find_ticket_by_enrollment_id(enrollment.id)
        if not ticket_grants_hotel(ticket):
            logger.info(f"Enrollment {enrollment.id} has no ticket granting hotel access")
            return AuthorizationResult.fail(
                forbidden_error("Ticket does not include in-person hotel accommodation")
            )

        if ticket.status != TicketStatus.PAID:
            logger.info(f"Ticket {ticket.id} is {ticket.status.value}, payment required")
            return AuthorizationResult.fail(payment_required_error())

        return AuthorizationResult.ok(enrollment, ticket)

    def list_available_hotels(self, user_id: int) -> List[Hotel]:
        """All hotels, once the user passes the guard chain (may be empty)"""
        self.resolve_authorization(user_id).raise_for_failure()
        return self._hotels.find_hotels()

    def list_hotel_rooms(self, hotel_id: Union[int, str], user_id: int) -> Hotel:
        """
        A hotel with its rooms, once the user passes the guard chain

        Raises:
            AppError(NOT_FOUND): hotel_id is not an integer or no hotel has
                this id. A hotel without rooms is returned with an empty room
                list.
        """
        self.resolve_authorization(user_id).raise_for_failure()

        hotel = self._hotels.find_hotel_with_rooms(parse_hotel_id(hotel_id))
        if hotel is None:
            raise not_found_error(f"Hotel {hotel_id} not found")
        return hotel
