# cinelog/schemas/user.py

from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator


class User(BaseModel):
    user_id: int = Field(description="User ID")
    email: str = Field(description="Email")
    created_at: Optional[datetime] = Field(default=None, description="Registered at")

    class Config:
        from_attributes = True


class UserRegister(BaseModel):
    email: EmailStr = Field(description="Email")
    password: str = Field(description="Password", min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserLogin(BaseModel):
    email: str = Field(description="Email")
    password: str = Field(description="Password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class RegisterResponse(BaseModel):
    message: str = Field(description="Result message")
    user_id: int = Field(description="ID of the new user")


class TokenResponse(BaseModel):
    message: str = Field(default="Login successful", description="Result message")
    access_token: str = Field(description="Access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: User = Field(description="Logged-in user")
