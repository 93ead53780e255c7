# cinelog/services/review_service.py

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import select, func, desc
from sqlalchemy.exc import IntegrityError
from cinelog.models.review import ReviewModel
from cinelog.schemas.review import Review, ReviewUpsert, MovieStats
from cinelog.schemas.user import User
from cinelog.core.exceptions import PermissionDenied, ValidationFailed

logger = logging.getLogger(__name__)


class ReviewService:

    def __init__(self, db: Session):
        self.db = db

    def _get_review_model(self, movie_id: str, user_id: int):
        stmt = select(ReviewModel).where(
            ReviewModel.movie_id == movie_id, ReviewModel.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    @staticmethod
    def _apply(review_model: ReviewModel, values: dict) -> None:
        for field, value in values.items():
            setattr(review_model, field, value)

    async def upsert_review(
        self, movie_id: str, review_data: ReviewUpsert, current_user: User
    ) -> Tuple[Review, bool]:
        """Create or overwrite the caller's review of a movie.

        Returns the stored review and whether a new row was inserted. The
        flag comes from the lookup itself, never from comparing timestamps.
        """
        movie_id = movie_id.strip()
        if not movie_id:
            raise ValidationFailed("Movie id is required")

        values = {
            "user_email": current_user.email,
            "rating": float(review_data.rating),
            "review_text": (review_data.review_text or "").strip(),
            "tags": list(review_data.tags or []),
            "is_spoiler": bool(review_data.is_spoiler),
            "updated_at": datetime.utcnow(),
        }

        review_model = self._get_review_model(movie_id, current_user.user_id)
        created = review_model is None

        if created:
            review_model = ReviewModel(
                movie_id=movie_id,
                user_id=current_user.user_id,
                created_at=values["updated_at"],
                **values,
            )
            self.db.add(review_model)
            try:
                self.db.commit()
            except IntegrityError:
                # A concurrent request inserted the same (movie, user) pair first
                self.db.rollback()
                review_model = self._get_review_model(movie_id, current_user.user_id)
                if review_model is None:
                    raise
                created = False

        if not created:
            self._apply(review_model, values)
            self.db.commit()

        self.db.refresh(review_model)
        logger.info(
            "Review %s for movie %s by user %s",
            "created" if created else "updated",
            movie_id,
            current_user.user_id,
        )
        return Review.model_validate(review_model), created

    async def get_movie_reviews(self, movie_id: str) -> List[Review]:
        stmt = (
            select(ReviewModel)
            .where(ReviewModel.movie_id == movie_id)
            .order_by(desc(ReviewModel.created_at), desc(ReviewModel.review_id))
        )
        rows = self.db.execute(stmt).scalars().all()
        return [Review.model_validate(row) for row in rows]

    async def get_movie_stats(self, movie_id: str) -> MovieStats:
        """Average rating and review count, recomputed from every review"""
        stmt = select(ReviewModel.rating).where(ReviewModel.movie_id == movie_id)
        ratings = self.db.execute(stmt).scalars().all()

        if not ratings:
            return MovieStats(average_rating=0, review_count=0)

        average = sum(ratings) / len(ratings)
        rounded = Decimal(str(average)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return MovieStats(average_rating=float(rounded), review_count=len(ratings))

    async def count_user_reviews(self, user_id: int, current_user: User) -> int:
        if user_id != current_user.user_id:
            raise PermissionDenied("Not authorized to access this user's statistics")

        stmt = select(func.count(ReviewModel.review_id)).where(ReviewModel.user_id == user_id)
        return self.db.execute(stmt).scalar() or 0
