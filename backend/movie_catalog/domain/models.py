from enum import Enum
from typing import Optional


class Condition(str, Enum):
    NUEVA = "Nueva"
    BUENA = "Buena"
    USADA = "Usada"
    DETERIORADA = "Deteriorada"


class Medium(str, Enum):
    DVD = "DVD"
    BLU_RAY = "Blu-ray"
    VHS = "VHS"


class User:
    def __init__(
        self,
        username: str,
        password: str,
        id: Optional[int] = None,
        is_admin: bool = False
    ):
        self.username = username
        self.password = password
        self.id = id
        self.is_admin = is_admin

    def __repr__(self):
        return f"User(id={self.id}, username={self.username!r}, is_admin={self.is_admin})"

class Movie:
    def __init__(
        self,
        title: str,
        genre: str,
        year: int,
        description: Optional[str] = None,
        director: Optional[str] = None,
        id: Optional[int] = None
    ):
        self.title = title
        self.genre = genre
        self.year = year
        self.description = description
        self.director = director
        self.id = id

    def __str__(self):
        return f"{self.title} ({self.year})"

class Copy:
    """A physical copy of a movie owned by one user.

    ``movie`` is a read-only snapshot filled in when the copy is loaded from
    the store; the persisted reference is ``movie_id``.
    """

    def __init__(
        self,
        movie_id: Optional[int],
        user_id: Optional[int],
        condition: Condition,
        medium: Medium,
        id: Optional[int] = None,
        movie: Optional[Movie] = None
    ):
        self.movie_id = movie_id
        self.user_id = user_id
        self.condition = condition
        self.medium = medium
        self.id = id
        self.movie = movie

    def __repr__(self):
        title = self.movie.title if self.movie else None
        return (
            f"Copy(id={self.id}, movie={title!r}, user_id={self.user_id}, "
            f"condition={getattr(self.condition, 'value', self.condition)!r}, "
            f"medium={getattr(self.medium, 'value', self.medium)!r})"
        )
