# cinelog/api/tmdb.py

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException, Depends, Path, Query
from cinelog.services.tmdb_service import TMDBService
from cinelog.core.exceptions import ServiceError

router = APIRouter()


def get_tmdb_service() -> TMDBService:
    return TMDBService()


@router.get(
    "/popular",
    response_model=List[Dict[str, Any]],
    summary="Popular movies",
)
async def get_popular_movies(tmdb_service: TMDBService = Depends(get_tmdb_service)):
    try:
        return await tmdb_service.get_popular_movies()
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.get(
    "/upcoming",
    response_model=List[Dict[str, Any]],
    summary="Upcoming movies",
)
async def get_upcoming_movies(tmdb_service: TMDBService = Depends(get_tmdb_service)):
    try:
        return await tmdb_service.get_upcoming_movies()
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.get(
    "/featured",
    response_model=Dict[str, Any],
    summary="Featured movie",
    description="The first movie currently playing in theaters.",
)
async def get_featured_movie(tmdb_service: TMDBService = Depends(get_tmdb_service)):
    try:
        return await tmdb_service.get_featured_movie()
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.get(
    "/movie/{movie_id}",
    response_model=Dict[str, Any],
    summary="Movie details",
    description="TMDB movie details with credits, videos, images, release dates and watch providers.",
)
async def get_movie_details(
    movie_id: str = Path(description="TMDB movie ID"),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    try:
        return await tmdb_service.get_movie_details(movie_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.get(
    "/search/movie",
    response_model=List[Dict[str, Any]],
    summary="Search movies",
)
async def search_movies(
    query: Optional[str] = Query(default=None, description="Search terms"),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    try:
        return await tmdb_service.search_movies(query)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
