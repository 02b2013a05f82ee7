from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Union

from movie_catalog.domain.models import Condition, Copy, Medium, Movie, User


class LoginRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserProfile(BaseModel):
    id: int
    username: str
    is_admin: bool

    @classmethod
    def from_domain(cls, user: User) -> "UserProfile":
        return cls(id=user.id, username=user.username, is_admin=user.is_admin)


class MovieCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str
    genre: str
    # raw form text; range and format are checked by MovieService
    year: Union[int, str]
    description: Optional[str] = None
    director: Optional[str] = None

class MovieResponse(BaseModel):
    id: int
    title: str
    genre: str
    year: int
    description: Optional[str] = None
    director: Optional[str] = None

    @classmethod
    def from_domain(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            genre=movie.genre,
            year=movie.year,
            description=movie.description,
            director=movie.director
        )


class CopyCreate(BaseModel):
    movie_id: int
    condition: Condition
    medium: Medium

class CopyUpdate(BaseModel):
    condition: Condition
    medium: Medium
    # sent back unchanged by the detail form; a different value is rejected
    movie_id: Optional[int] = None

class CopyResponse(BaseModel):
    id: int
    movie_id: int
    title: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    condition: Condition
    medium: Medium

    @classmethod
    def from_domain(cls, copy: Copy) -> "CopyResponse":
        movie = copy.movie
        return cls(
            id=copy.id,
            movie_id=copy.movie_id,
            title=movie.title if movie else None,
            genre=movie.genre if movie else None,
            year=movie.year if movie else None,
            condition=copy.condition,
            medium=copy.medium
        )

class CopyListResponse(BaseModel):
    total: int
    copies: List[CopyResponse]
