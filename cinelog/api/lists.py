# cinelog/api/lists.py

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Path, status
from sqlalchemy.orm import Session
from cinelog.database import MAX_ID, get_db
from cinelog.schemas.user_list import UserList, UserListWrite, ListMovieAdd, MessageResponse
from cinelog.schemas.user import User
from cinelog.services.list_service import ListService
from cinelog.core.dependencies import get_current_user
from cinelog.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_list_service(db: Session = Depends(get_db)) -> ListService:
    return ListService(db)


@router.post(
    "",
    response_model=UserList,
    status_code=status.HTTP_201_CREATED,
    summary="Create a list",
    description="Creates an empty list. Names are unique per user.",
)
async def create_list(
    list_data: UserListWrite,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        return await list_service.create_list(list_data, current_user.user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Creating list failed")
        raise HTTPException(status_code=500, detail="Error creating the list")


@router.get(
    "",
    response_model=List[UserList],
    summary="My lists",
    description="The caller's lists, most recently updated first.",
)
async def get_my_lists(
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        return await list_service.get_user_lists(current_user.user_id)
    except Exception:
        logger.exception("Fetching lists failed")
        raise HTTPException(status_code=500, detail="Error fetching lists")


@router.get(
    "/{list_id}",
    response_model=UserList,
    summary="List detail",
)
async def get_list(
    list_id: int = Path(description="List ID", ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        return await list_service.get_list(list_id, current_user.user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Fetching list %s failed", list_id)
        raise HTTPException(status_code=500, detail="Error fetching list details")


@router.put(
    "/{list_id}",
    response_model=UserList,
    summary="Update a list",
    description="Replaces name, description and visibility. A new name must not clash with another of the caller's lists.",
)
async def update_list(
    list_id: int = Path(description="List ID", ge=1, le=MAX_ID),
    list_data: UserListWrite = ...,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        return await list_service.update_list(list_id, list_data, current_user.user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Updating list %s failed", list_id)
        raise HTTPException(status_code=500, detail="Error updating the list")


@router.delete(
    "/{list_id}",
    response_model=MessageResponse,
    summary="Delete a list",
)
async def delete_list(
    list_id: int = Path(description="List ID", ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        await list_service.delete_list(list_id, current_user.user_id)
        return MessageResponse(message="List deleted successfully")
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Deleting list %s failed", list_id)
        raise HTTPException(status_code=500, detail="Error deleting the list")


@router.post(
    "/{list_id}/movies",
    response_model=UserList,
    summary="Add a movie to a list",
    description="Appends a movie. Fails if the movie is already in the list or the list is full.",
)
async def add_movie_to_list(
    list_id: int = Path(description="List ID", ge=1, le=MAX_ID),
    movie_data: ListMovieAdd = ...,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        return await list_service.add_movie(list_id, movie_data, current_user.user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Adding movie to list %s failed", list_id)
        raise HTTPException(status_code=500, detail="Error adding the movie to the list")


@router.delete(
    "/{list_id}/movies/{tmdb_movie_id}",
    response_model=UserList,
    summary="Remove a movie from a list",
)
async def remove_movie_from_list(
    list_id: int = Path(description="List ID", ge=1, le=MAX_ID),
    tmdb_movie_id: str = Path(description="TMDB movie ID"),
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service),
):
    try:
        return await list_service.remove_movie(list_id, tmdb_movie_id, current_user.user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Removing movie from list %s failed", list_id)
        raise HTTPException(status_code=500, detail="Error removing the movie from the list")
