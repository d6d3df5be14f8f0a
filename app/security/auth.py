"""
Authentication

Bearer JWTs are issued at sign-in and stored in a session row; a token is
accepted only if it decodes and its session still exists.
"""
import bcrypt
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.errors import AppError, unauthorized_error
from app.repositories.session_repository import SessionRepository

logger = logging.getLogger(__name__)

# Missing credentials must be a 401, not FastAPI's default 403
security = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its hash"""
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


def create_access_token(user_id: int, expires_minutes: Optional[int] = None) -> str:
    """Create a JWT carrying the user id"""
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(UTC) + timedelta(minutes=minutes)
    to_encode = {"userId": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode a JWT, raising an UNAUTHORIZED AppError when it is invalid"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise unauthorized_error("Invalid token")
    if not isinstance(payload.get("userId"), int):
        raise unauthorized_error("Invalid token")
    return payload


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> int:
    """Authenticated user id from the bearer token"""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("You must be signed in to continue")

    token = credentials.credentials
    try:
        payload = decode_token(token)
    except AppError as e:
        raise _unauthorized(e.message)

    if SessionRepository(db).find_by_token(token) is None:
        logger.info(f"No session for token of user {payload['userId']}")
        raise _unauthorized("You must be signed in to continue")

    return payload["userId"]
