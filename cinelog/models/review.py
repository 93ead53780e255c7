# cinelog/models/review.py

from datetime import datetime
from sqlalchemy import (
    Column,
    BigInteger,
    Integer,
    String,
    Text,
    Float,
    Boolean,
    DateTime,
    JSON,
    ForeignKey,
    UniqueConstraint,
)
from cinelog.database import Base


class ReviewModel(Base):
    __tablename__ = "reviews"

    review_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    movie_id = Column(String(32), nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey("users.user_id"), nullable=False, index=True)
    user_email = Column(String(255), nullable=False)
    rating = Column(Float, nullable=False)
    review_text = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)
    is_spoiler = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (UniqueConstraint("movie_id", "user_id", name="unique_movie_review"),)

    def __repr__(self):
        return f"<ReviewModel(id={self.review_id}, movie_id={self.movie_id}, rating={self.rating})>"
