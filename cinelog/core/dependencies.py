# cinelog/core/dependencies.py

import logging
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from cinelog.database import get_db
from cinelog.schemas.user import User
from cinelog.services.user_service import UserService
from cinelog.core.auth import decode_access_token
from cinelog.core.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    user_service: UserService = Depends(get_user_service)
) -> User:
    """Resolve the bearer token to the logged-in user"""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token provided"
        )

    try:
        user_id = decode_access_token(credentials.credentials)
    except AuthenticationFailed as e:
        logger.warning("Rejected bearer token: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    user = await user_service.get_user_by_id(user_id)
    if not user:
        logger.warning("Token subject %s no longer exists", user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found for this token"
        )

    return user
