# cinelog/core/config.py

from functools import lru_cache
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="Cinelog", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")

    # Database
    database_url: str = Field(default="sqlite:///./cinelog.db", description="SQLAlchemy database URL")

    # JWT
    secret_key: str = Field(default="secret-jwt-key", description="JWT signing key")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(default=60, description="JWT lifetime (minutes)")

    # TMDB
    tmdb_api_key: Optional[str] = Field(default=None, description="TMDB API key")
    tmdb_access_token: Optional[str] = Field(default=None, description="TMDB read access token")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDB API URL")
    tmdb_language: str = Field(default="pt-BR", description="Language for TMDB results")
    tmdb_timeout: float = Field(default=10.0, description="Request timeout")

    # Lists
    max_list_movies: int = Field(default=500, ge=1, description="Maximum movies per list")

    @property
    def tmdb_configured(self) -> bool:
        return bool(self.tmdb_access_token or self.tmdb_api_key)

    @property
    def tmdb_headers(self) -> dict[str, str]:
        """TMDB request headers"""
        headers = {"Accept": "application/json"}
        if self.tmdb_access_token:
            headers["Authorization"] = f"Bearer {self.tmdb_access_token}"
        return headers

    @property
    def tmdb_auth_params(self) -> dict[str, str]:
        # The v3 api key is only sent when no bearer token is configured
        if self.tmdb_access_token or not self.tmdb_api_key:
            return {}
        return {"api_key": self.tmdb_api_key}


@lru_cache()
def get_settings() -> Settings:
    return Settings()
