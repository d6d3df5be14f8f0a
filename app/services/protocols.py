"""
Capability interfaces for the hotels slice.

Services depend on these instead of concrete repositories, and the router
depends on HotelsServiceProtocol, so any layer can be swapped for a test double.
"""
from typing import List, Optional, Protocol, Union, runtime_checkable

from app.models.entities import Enrollment, Hotel, Ticket


@runtime_checkable
class HotelsRepositoryProtocol(Protocol):
    """Read access to hotels and rooms."""

    def find_hotels(self) -> List[Hotel]:
        ...

    def find_hotel_with_rooms(self, hotel_id: int) -> Optional[Hotel]:
        ...


@runtime_checkable
class EnrollmentReader(Protocol):

    def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        ...


@runtime_checkable
class TicketReader(Protocol):

    def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        ...


@runtime_checkable
class HotelsServiceProtocol(Protocol):
    """What the hotels router needs from the service layer."""

    def list_available_hotels(self, user_id: int) -> List[Hotel]:
        ...

    def list_hotel_rooms(self, hotel_id: Union[int, str], user_id: int) -> Hotel:
        ...
