# cinelog/api/__init__.py

from fastapi import APIRouter
from . import auth, reviews, movies, lists, tmdb, system

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
api_router.include_router(movies.router, prefix="/movies", tags=["movies"])
api_router.include_router(lists.router, prefix="/lists", tags=["lists"])
api_router.include_router(tmdb.router, prefix="/tmdb", tags=["tmdb"])
api_router.include_router(system.router, prefix="/system", tags=["system"])
