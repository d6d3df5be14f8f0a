"""
Hotels routes

The only place where service errors become HTTP status codes.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.errors import AppError, status_code_for
from app.models.schemas import HotelResponse, HotelWithRoomsResponse
from app.repositories import EnrollmentRepository, HotelsRepository, TicketRepository
from app.security.auth import get_current_user_id
from app.services.hotels_service import HotelsService
from app.services.protocols import HotelsServiceProtocol

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])


def get_hotels_service(db: Session = Depends(get_db)) -> HotelsServiceProtocol:
    """Build the hotels service for this request"""
    return HotelsService(
        hotels_repository=HotelsRepository(db),
        enrollment_repository=EnrollmentRepository(db),
        ticket_repository=TicketRepository(db),
    )


def _to_http_error(error: Exception) -> HTTPException:
    if isinstance(error, AppError):
        return HTTPException(status_code=status_code_for(error.kind), detail=error.message)
    # Unclassified errors are reported as not found
    logger.exception("Unhandled error in hotels route")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")


@router.get("", response_model=List[HotelResponse])
def get_hotels(
    user_id: int = Depends(get_current_user_id),
    service: HotelsServiceProtocol = Depends(get_hotels_service)
):
    """List hotels available to the current user"""
    try:
        return service.list_available_hotels(user_id)
    except Exception as e:
        raise _to_http_error(e)


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
def get_hotel_rooms(
    hotel_id: str,
    user_id: int = Depends(get_current_user_id),
    service: HotelsServiceProtocol = Depends(get_hotels_service)
):
    """A hotel with its rooms; the id is parsed by the service after the guard chain"""
    try:
        return service.list_hotel_rooms(hotel_id, user_id)
    except Exception as e:
        raise _to_http_error(e)
