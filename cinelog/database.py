# cinelog/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from cinelog.core.config import get_settings

settings = get_settings()

DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    # One shared connection so an in-memory database survives across sessions
    engine = create_engine(
        DATABASE_URL,
        echo=settings.debug,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.debug,
        pool_pre_ping=True,  # check connections before use
        pool_recycle=300  # recycle every 5 minutes
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

Base = declarative_base()

# Largest value a BIGINT primary key can hold
MAX_ID = 2**63 - 1


# Request-scoped session dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
