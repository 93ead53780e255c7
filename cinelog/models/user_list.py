# cinelog/models/user_list.py

from datetime import datetime
from sqlalchemy import (
    Column,
    BigInteger,
    Integer,
    String,
    Boolean,
    DateTime,
    JSON,
    ForeignKey,
    UniqueConstraint,
)
from cinelog.database import Base


class UserListModel(Base):
    __tablename__ = "user_lists"

    list_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey("users.user_id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False, default="")
    is_public = Column(Boolean, default=False, nullable=False)
    # Embedded sequence of {tmdb_id, title, poster_path, added_at}; tmdb_id is the only identity
    movies = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (UniqueConstraint("user_id", "name", name="unique_user_list_name"),)

    def __repr__(self):
        return f"<UserListModel(id={self.list_id}, user_id={self.user_id}, name='{self.name}')>"
