# cinelog/api/reviews.py

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Path, Response, status
from sqlalchemy.orm import Session
from cinelog.database import MAX_ID, get_db
from cinelog.schemas.review import Review, ReviewUpsert, ReviewUpsertResponse, ReviewCount
from cinelog.schemas.user import User
from cinelog.services.review_service import ReviewService
from cinelog.core.dependencies import get_current_user
from cinelog.core.exceptions import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


@router.get(
    "/user/{user_id}/count",
    response_model=ReviewCount,
    summary="Count a user's reviews",
    description="Number of reviews written by the caller. Other users' counts are forbidden.",
)
async def count_user_reviews(
    user_id: int = Path(description="User ID", ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        count = await review_service.count_user_reviews(user_id, current_user)
        return ReviewCount(count=count)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Counting reviews of user %s failed", user_id)
        raise HTTPException(status_code=500, detail="Internal error while counting reviews")


@router.post(
    "/{movie_id}",
    response_model=ReviewUpsertResponse,
    summary="Write a review",
    description="Creates the caller's review of a movie, or overwrites it if one already exists.",
    responses={201: {"model": ReviewUpsertResponse, "description": "Review created"}},
)
async def upsert_review(
    response: Response,
    movie_id: str = Path(description="TMDB movie ID"),
    review_data: ReviewUpsert = ...,
    current_user: User = Depends(get_current_user),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        review, created = await review_service.upsert_review(movie_id, review_data, current_user)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception:
        logger.exception("Saving review for movie %s failed", movie_id)
        raise HTTPException(status_code=500, detail="Internal error while saving the review")

    if created:
        response.status_code = status.HTTP_201_CREATED
        return ReviewUpsertResponse(message="Review added successfully", review=review)
    return ReviewUpsertResponse(message="Review updated successfully", review=review)


@router.get(
    "/{movie_id}",
    response_model=List[Review],
    summary="Movie reviews",
    description="All reviews of a movie, newest first.",
)
async def get_movie_reviews(
    movie_id: str = Path(description="TMDB movie ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return await review_service.get_movie_reviews(movie_id)
    except Exception:
        logger.exception("Fetching reviews for movie %s failed", movie_id)
        raise HTTPException(status_code=500, detail="Internal error while fetching reviews")
