"""
Enrollment repository
"""
from typing import Optional
from sqlalchemy.orm import Session, joinedload

from app.models.entities import Enrollment


class EnrollmentRepository:

    def __init__(self, db_session: Session):
        self._db = db_session

    def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """Enrollment of a user with its address loaded, or None"""
        return (
            self._db.query(Enrollment)
            .options(joinedload(Enrollment.address))
            .filter(Enrollment.user_id == user_id)
            .first()
        )
