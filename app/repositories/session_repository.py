"""
Session repository - issued tokens
"""
from typing import Optional
from sqlalchemy.orm import Session

from app.models.entities import UserSession


class SessionRepository:

    def __init__(self, db_session: Session):
        self._db = db_session

    def create(self, user_id: int, token: str) -> UserSession:
        session = UserSession(user_id=user_id, token=token)
        self._db.add(session)
        self._db.commit()
        self._db.refresh(session)
        return session

    def find_by_token(self, token: str) -> Optional[UserSession]:
        return self._db.query(UserSession).filter(UserSession.token == token).first()
