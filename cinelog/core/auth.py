# cinelog/core/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from cinelog.core.config import get_settings
from cinelog.core.exceptions import AuthenticationFailed

settings = get_settings()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SECRET_KEY = settings.secret_key
ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes


class InvalidTokenError(AuthenticationFailed):
    pass


class TokenExpiredError(AuthenticationFailed):
    pass


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    """Issue a signed JWT access token"""
    to_encode = data.copy()
    if expires_delta is not None:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> int:
    """Verify a JWT and return the user id it was issued for.

    Raises TokenExpiredError for an expired token and InvalidTokenError for
    anything else that does not decode to a usable subject.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredError("Token expired")
    except JWTError:
        raise InvalidTokenError("Invalid token")

    subject = payload.get("sub")
    if subject is None:
        raise InvalidTokenError("Invalid token")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise InvalidTokenError("Invalid token")
