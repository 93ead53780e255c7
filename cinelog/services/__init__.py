# cinelog/services/__init__.py

from .tmdb_service import TMDBService
from .user_service import UserService
from .review_service import ReviewService
from .list_service import ListService

__all__ = ["TMDBService", "UserService", "ReviewService", "ListService"]
