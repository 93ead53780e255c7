# cinelog/services/tmdb_service.py

import logging
from typing import Any, Dict, List, Optional
import httpx
from cinelog.core.config import Settings, get_settings
from cinelog.core.exceptions import NotFoundError, UpstreamError, ValidationFailed

logger = logging.getLogger(__name__)

MOVIE_DETAIL_APPENDS = "credits,videos,images,release_dates,watch/providers"


class TMDBService:
    """Read-only pass-through to the TMDB v3 API using the server's credentials"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.timeout = httpx.Timeout(self.settings.tmdb_timeout)
        self.transport = transport
        self.default_language = self.settings.tmdb_language

    async def _get(self, path: str, params: Dict[str, Any], action: str) -> Dict[str, Any]:
        if not self.settings.tmdb_configured:
            raise UpstreamError("TMDB API key is not configured on the server")

        url = f"{self.settings.tmdb_base_url}{path}"
        query = {**self.settings.tmdb_auth_params, **params}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(url, params=query, headers=self.settings.tmdb_headers)
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                try:
                    body = e.response.json()
                except ValueError:
                    body = {}
                if not isinstance(body, dict):
                    body = {}
                upstream_message = body.get("status_message") or str(e)
                logger.warning("TMDB %s failed with %s: %s", path, status_code, upstream_message)
                raise UpstreamError(
                    f"Error {action} on TMDB: {upstream_message}",
                    status_code=status_code,
                    tmdb_status_code=body.get("status_code"),
                )
            except httpx.RequestError as e:
                logger.warning("TMDB %s request failed: %s", path, e)
                raise UpstreamError(f"Internal error {action}: {str(e)}")

    async def _get_results(self, path: str, action: str, **params) -> List[Dict[str, Any]]:
        params.setdefault("language", self.default_language)
        params.setdefault("page", 1)
        data = await self._get(path, params, action)
        return data.get("results", [])

    async def get_popular_movies(self) -> List[Dict[str, Any]]:
        return await self._get_results("/movie/popular", "fetching popular movies")

    async def get_upcoming_movies(self) -> List[Dict[str, Any]]:
        return await self._get_results("/movie/upcoming", "fetching upcoming movies")

    async def get_featured_movie(self) -> Dict[str, Any]:
        """First movie currently playing in theaters"""
        results = await self._get_results("/movie/now_playing", "fetching featured movie")
        if not results:
            raise NotFoundError("No featured movie found")
        return results[0]

    async def get_movie_details(self, movie_id: str) -> Dict[str, Any]:
        movie_id = movie_id.strip()
        if not movie_id:
            raise ValidationFailed("Movie id is required")

        params = {
            "language": self.default_language,
            "append_to_response": MOVIE_DETAIL_APPENDS,
        }
        return await self._get(f"/movie/{movie_id}", params, "fetching movie details")

    async def search_movies(self, query: Optional[str]) -> List[Dict[str, Any]]:
        if not query or not query.strip():
            raise ValidationFailed("A search query is required")

        return await self._get_results(
            "/search/movie",
            "searching movies",
            query=query.strip(),
            include_adult="false",
        )
