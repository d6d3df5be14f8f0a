# Business Services
from app.services.hotels_service import HotelsService, AuthorizationResult
from app.services.auth_service import AuthService

__all__ = ['HotelsService', 'AuthorizationResult', 'AuthService']
