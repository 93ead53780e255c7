# cinelog/api/auth.py

import logging
from fastapi import APIRouter, HTTPException, Depends, status
from cinelog.schemas.user import UserRegister, UserLogin, RegisterResponse, TokenResponse
from cinelog.services.user_service import UserService
from cinelog.core.auth import create_access_token
from cinelog.core.dependencies import get_user_service
from cinelog.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Creates an account from an email and a password.",
)
async def register(
    user_data: UserRegister, user_service: UserService = Depends(get_user_service)
):
    try:
        user = await user_service.register_user(user_data)
        return RegisterResponse(message="User registered successfully", user_id=user.user_id)

    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Registration failed")
        raise HTTPException(status_code=500, detail="Internal error while registering the user")


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login",
    description="Checks email and password and issues a bearer token.",
)
async def login(
    login_data: UserLogin, user_service: UserService = Depends(get_user_service)
):
    try:
        user = await user_service.authenticate_user(
            email=login_data.email, password=login_data.password
        )

        if not user:
            raise HTTPException(status_code=401, detail="Invalid email or password")

        access_token = create_access_token(data={"sub": str(user.user_id), "email": user.email})

        return TokenResponse(access_token=access_token, user=user)

    except HTTPException:
        raise
    except Exception:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail="Internal error while logging in")
