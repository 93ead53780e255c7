# cinelog/schemas/__init__.py

from .user import (
    User,
    UserRegister,
    UserLogin,
    RegisterResponse,
    TokenResponse,
)
from .review import Review, ReviewUpsert, ReviewUpsertResponse, ReviewCount, MovieStats
from .user_list import UserList, UserListWrite, ListMovie, ListMovieAdd, MessageResponse

__all__ = [
    "User",
    "UserRegister",
    "UserLogin",
    "RegisterResponse",
    "TokenResponse",
    "Review",
    "ReviewUpsert",
    "ReviewUpsertResponse",
    "ReviewCount",
    "MovieStats",
    "UserList",
    "UserListWrite",
    "ListMovie",
    "ListMovieAdd",
    "MessageResponse",
]
