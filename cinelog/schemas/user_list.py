# cinelog/schemas/user_list.py

from typing import List, Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator


class ListMovie(BaseModel):
    """Movie entry embedded in a list"""

    tmdb_id: str = Field(description="TMDB movie ID")
    title: str = Field(description="Movie title")
    poster_path: str = Field(default="", description="TMDB poster path")
    added_at: Optional[datetime] = Field(default=None, description="Added at")


class UserList(BaseModel):
    list_id: int = Field(description="List ID")
    user_id: int = Field(description="Owner ID")
    name: str = Field(description="List name")
    description: str = Field(default="", description="Description")
    is_public: bool = Field(default=False, description="Public list")
    movies: List[ListMovie] = Field(default_factory=list, description="Movies in the list")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    updated_at: Optional[datetime] = Field(default=None, description="Updated at")

    class Config:
        from_attributes = True


class UserListWrite(BaseModel):
    """Body for both creating and updating a list"""

    name: str = Field(description="List name")
    description: Optional[str] = Field(default=None, description="Description")
    is_public: Optional[StrictBool] = Field(default=None, description="Public list")

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("List name is required")
        if len(value) > 100:
            raise ValueError("List name cannot exceed 100 characters")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if len(value) > 500:
            raise ValueError("Description cannot exceed 500 characters")
        return value


class ListMovieAdd(BaseModel):
    tmdb_id: Union[StrictInt, StrictStr] = Field(description="TMDB movie ID")
    title: str = Field(description="Movie title", min_length=1)
    poster_path: Optional[str] = Field(default=None, description="TMDB poster path")

    @field_validator("tmdb_id")
    @classmethod
    def stringify_tmdb_id(cls, value: Union[int, str]) -> str:
        value = str(value).strip()
        if not value:
            raise ValueError("tmdb_id is required")
        return value


class MessageResponse(BaseModel):
    message: str = Field(description="Result message")
