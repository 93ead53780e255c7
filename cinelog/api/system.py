# cinelog/api/system.py

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session
from cinelog.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Liveness check")
def health_check():
    return {"status": "healthy", "service": "cinelog"}


@router.get(
    "/db-test",
    summary="Database check",
    description="Runs SELECT 1 on a request session.",
)
def check_database(db: Session = Depends(get_db)):
    try:
        result = db.execute(text("SELECT 1")).scalar()
    except Exception:
        logger.exception("Database check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
    return {"status": "ok", "result": result}
