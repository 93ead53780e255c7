# cinelog/api/movies.py

import logging
from fastapi import APIRouter, HTTPException, Depends, Path
from cinelog.schemas.review import MovieStats
from cinelog.services.review_service import ReviewService
from cinelog.api.reviews import get_review_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{movie_id}/stats",
    response_model=MovieStats,
    summary="Movie rating statistics",
    description="Average rating (one decimal) and review count, computed from all reviews on each request.",
)
async def get_movie_stats(
    movie_id: str = Path(description="TMDB movie ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return await review_service.get_movie_stats(movie_id)
    except Exception:
        logger.exception("Computing stats for movie %s failed", movie_id)
        raise HTTPException(status_code=500, detail="Error computing the average rating")
