"""
Auth routes
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.errors import AppError, status_code_for
from app.models.schemas import SignInRequest, SignInResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-in", response_model=SignInResponse)
def sign_in(data: SignInRequest, db: Session = Depends(get_db)):
    """Sign in with email and password"""
    service = AuthService(db)
    try:
        return service.sign_in(data.email, data.password)
    except AppError as e:
        raise HTTPException(status_code=status_code_for(e.kind), detail=e.message)
