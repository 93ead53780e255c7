# cinelog/models/user.py

from datetime import datetime
from sqlalchemy import Column, BigInteger, Integer, String, DateTime
from cinelog.database import Base


class UserModel(Base):
    __tablename__ = "users"

    user_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<UserModel(id={self.user_id}, email='{self.email}')>"
