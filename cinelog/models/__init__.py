# cinelog/models/__init__.py

from .user import UserModel
from .review import ReviewModel
from .user_list import UserListModel


__all__ = [
    "UserModel",
    "ReviewModel",
    "UserListModel",
]
