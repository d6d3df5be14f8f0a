"""
Hotels repository

Read-only queries over hotels and their rooms
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from app.models.entities import Hotel


class HotelsRepository:
    """
    Hotel repository

    Store errors are not caught here; they propagate to the caller.
    """

    def __init__(self, db_session: Session):
        self._db = db_session

    def find_hotels(self) -> List[Hotel]:
        """All hotels, unfiltered and unpaginated"""
        return self._db.query(Hotel).order_by(Hotel.id).all()

    def find_hotel_with_rooms(self, hotel_id: int) -> Optional[Hotel]:
        """
        Load one hotel with its rooms

        Args:
            hotel_id: Hotel ID

        Returns:
            The Hotel with `rooms` loaded (possibly empty), or None if no
            hotel has this id
        """
        return (
            self._db.query(Hotel)
            .options(selectinload(Hotel.rooms))
            .filter(Hotel.id == hotel_id)
            .first()
        )
