# cinelog/services/user_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from cinelog.models.user import UserModel
from cinelog.schemas.user import User, UserRegister
from cinelog.core.auth import get_password_hash, verify_password
from cinelog.core.exceptions import ConflictError

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "This email is already in use"


def mask_email(email: str) -> str:
    """Keep the first character of the local part and the domain: a***@example.com"""
    local, _, domain = email.strip().lower().partition("@")
    if not domain:
        return "***"
    return f"{local[:1]}***@{domain}"


class UserService:

    def __init__(self, db: Session):
        self.db = db

    async def get_user_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        user_model = self.db.execute(stmt).scalar_one_or_none()

        return User.model_validate(user_model) if user_model else None

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.user_id == user_id)
        user_model = self.db.execute(stmt).scalar_one_or_none()

        return User.model_validate(user_model) if user_model else None

    async def register_user(self, user_data: UserRegister) -> User:
        # email is already normalized by the schema
        if await self.get_user_by_email(user_data.email):
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        user_model = UserModel(
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )

        self.db.add(user_model)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)
        self.db.refresh(user_model)

        logger.info("Registered user %s", user_model.user_id)
        return User.model_validate(user_model)

    async def authenticate_user(self, email: str, password: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        user_model = self.db.execute(stmt).scalar_one_or_none()

        if not user_model or not verify_password(password, user_model.password_hash):
            logger.warning("Failed login for %s", mask_email(email))
            return None

        logger.info("User %s logged in", user_model.user_id)
        return User.model_validate(user_model)
