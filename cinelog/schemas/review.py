# cinelog/schemas/review.py

from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator


class Review(BaseModel):
    review_id: int = Field(description="Review ID")
    movie_id: str = Field(description="TMDB movie ID")
    user_id: int = Field(description="Author ID")
    user_email: str = Field(description="Author email")
    rating: float = Field(description="Rating (0.5 ~ 5)")
    review_text: str = Field(default="", description="Review body")
    tags: List[str] = Field(default_factory=list, description="Tags")
    is_spoiler: bool = Field(default=False, description="Contains spoilers")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")

    class Config:
        from_attributes = True


class ReviewUpsert(BaseModel):
    rating: float = Field(description="Rating (0.5 ~ 5)", ge=0.5, le=5, strict=True)
    review_text: Optional[StrictStr] = Field(default=None, description="Review body", max_length=5000)
    tags: Optional[List[StrictStr]] = Field(default=None, description="Tags")
    is_spoiler: Optional[StrictBool] = Field(default=None, description="Contains spoilers")

    @field_validator("review_text", mode="before")
    @classmethod
    def strip_review_text(cls, value: Any) -> Any:
        # Length cap applies to the trimmed text
        if isinstance(value, str):
            return value.strip()
        return value


class ReviewUpsertResponse(BaseModel):
    message: str = Field(description="Result message")
    review: Review = Field(description="Stored review")


class ReviewCount(BaseModel):
    count: int = Field(description="Number of reviews")


class MovieStats(BaseModel):
    """Aggregate computed from all reviews of a movie"""

    average_rating: float = Field(default=0, description="Mean rating, one decimal")
    review_count: int = Field(default=0, description="Number of reviews")
