# cinelog/services/list_service.py

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, desc
from sqlalchemy.exc import IntegrityError
from cinelog.models.user_list import UserListModel
from cinelog.schemas.user_list import UserList, UserListWrite, ListMovieAdd
from cinelog.core.config import get_settings
from cinelog.core.exceptions import ConflictError, NotFoundError, ValidationFailed

logger = logging.getLogger(__name__)

LIST_NOT_FOUND_MESSAGE = "List not found or does not belong to this user"


class ListService:
    """Owner-scoped lists with an embedded movie sequence.

    Membership checks scan the embedded sequence linearly. That is only
    acceptable because a list never holds more than ``max_list_movies``
    entries, which ``add_movie`` enforces.
    """

    def __init__(self, db: Session, max_list_movies: Optional[int] = None):
        self.db = db
        self.max_list_movies = max_list_movies or get_settings().max_list_movies

    def _get_owned_list(self, list_id: int, user_id: int) -> UserListModel:
        stmt = select(UserListModel).where(
            UserListModel.list_id == list_id, UserListModel.user_id == user_id
        )
        list_model = self.db.execute(stmt).scalar_one_or_none()
        if not list_model:
            raise NotFoundError(LIST_NOT_FOUND_MESSAGE)
        return list_model

    def _name_taken(self, user_id: int, name: str, exclude_list_id: Optional[int] = None) -> bool:
        stmt = select(UserListModel.list_id).where(
            UserListModel.user_id == user_id, UserListModel.name == name
        )
        if exclude_list_id is not None:
            stmt = stmt.where(UserListModel.list_id != exclude_list_id)
        return self.db.execute(stmt).first() is not None

    def _commit(self, name: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f'You already have a list named "{name}"')

    @staticmethod
    def _find_movie(movies: list, tmdb_id: str) -> int:
        for index, movie in enumerate(movies):
            if movie.get("tmdb_id") == tmdb_id:
                return index
        return -1

    async def create_list(self, list_data: UserListWrite, user_id: int) -> UserList:
        if self._name_taken(user_id, list_data.name):
            raise ConflictError(f'You already have a list named "{list_data.name}"')

        now = datetime.utcnow()
        list_model = UserListModel(
            user_id=user_id,
            name=list_data.name,
            description=list_data.description or "",
            is_public=bool(list_data.is_public),
            movies=[],
            created_at=now,
            updated_at=now,
        )
        self.db.add(list_model)
        self._commit(list_data.name)
        self.db.refresh(list_model)

        logger.info("Created list %s for user %s", list_model.list_id, user_id)
        return UserList.model_validate(list_model)

    async def get_user_lists(self, user_id: int) -> List[UserList]:
        stmt = (
            select(UserListModel)
            .where(UserListModel.user_id == user_id)
            .order_by(desc(UserListModel.updated_at), desc(UserListModel.list_id))
        )
        rows = self.db.execute(stmt).scalars().all()
        return [UserList.model_validate(row) for row in rows]

    async def get_list(self, list_id: int, user_id: int) -> UserList:
        return UserList.model_validate(self._get_owned_list(list_id, user_id))

    async def update_list(self, list_id: int, list_data: UserListWrite, user_id: int) -> UserList:
        list_model = self._get_owned_list(list_id, user_id)

        if list_data.name.lower() != list_model.name.lower():
            if self._name_taken(user_id, list_data.name, exclude_list_id=list_id):
                raise ConflictError(f'You already have another list named "{list_data.name}"')

        list_model.name = list_data.name
        list_model.description = list_data.description or ""
        list_model.is_public = bool(list_data.is_public)
        list_model.updated_at = datetime.utcnow()
        self._commit(list_data.name)
        self.db.refresh(list_model)

        logger.info("Updated list %s", list_id)
        return UserList.model_validate(list_model)

    async def delete_list(self, list_id: int, user_id: int) -> bool:
        list_model = self._get_owned_list(list_id, user_id)
        self.db.delete(list_model)
        self.db.commit()

        logger.info("Deleted list %s", list_id)
        return True

    async def add_movie(self, list_id: int, movie_data: ListMovieAdd, user_id: int) -> UserList:
        list_model = self._get_owned_list(list_id, user_id)
        movies = list(list_model.movies or [])

        if self._find_movie(movies, movie_data.tmdb_id) != -1:
            raise ConflictError("This movie is already in the list")
        if len(movies) >= self.max_list_movies:
            raise ValidationFailed(f"A list cannot hold more than {self.max_list_movies} movies")

        now = datetime.utcnow()
        movies.append(
            {
                "tmdb_id": movie_data.tmdb_id,
                "title": movie_data.title,
                "poster_path": movie_data.poster_path or "",
                "added_at": now.isoformat(),
            }
        )
        # Assign a new list so the JSON column is flagged dirty
        list_model.movies = movies
        list_model.updated_at = now
        self.db.commit()
        self.db.refresh(list_model)

        logger.info("Added movie %s to list %s", movie_data.tmdb_id, list_id)
        return UserList.model_validate(list_model)

    async def remove_movie(self, list_id: int, tmdb_id: str, user_id: int) -> UserList:
        list_model = self._get_owned_list(list_id, user_id)
        movies = list(list_model.movies or [])

        index = self._find_movie(movies, tmdb_id.strip())
        if index == -1:
            raise NotFoundError("Movie not found in this list")

        del movies[index]
        list_model.movies = movies
        list_model.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(list_model)

        logger.info("Removed movie %s from list %s", tmdb_id, list_id)
        return UserList.model_validate(list_model)
