"""
Sign-in service - checks credentials and opens a session
"""
import logging
from sqlalchemy.orm import Session

from app.errors import unauthorized_error
from app.repositories.session_repository import SessionRepository
from app.repositories.user_repository import UserRepository
from app.security.auth import create_access_token, verify_password

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, db: Session):
        self._users = UserRepository(db)
        self._sessions = SessionRepository(db)

    def sign_in(self, email: str, password: str) -> dict:
        """
        Authenticate a user and create a session

        Returns:
            {"user": {"id", "email"}, "token": str}

        Raises:
            AppError(UNAUTHORIZED): unknown email or wrong password
        """
        user = self._users.find_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.info(f"Failed sign-in for {email}")
            raise unauthorized_error("Email or password are incorrect")

        token = create_access_token(user.id)
        self._sessions.create(user.id, token)
        logger.info(f"User {user.id} signed in")
        return {"user": {"id": user.id, "email": user.email}, "token": token}
