import logging
from datetime import date
from typing import List, Optional, Union

from movie_catalog.config.catalog import MIN_MOVIE_YEAR
from movie_catalog.domain.models import Movie
from movie_catalog.repositories.interface.movie_repository import MovieRepository
from movie_catalog.exceptions.catalog import InvalidRequestException, ResourceNotFoundException

logger = logging.getLogger(__name__)


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def parse_movie_year(year: Union[int, str]) -> int:
    """Validate a year typed in the movie form.

    Raises InvalidRequestException when it is not a number or falls outside
    MIN_MOVIE_YEAR..current year.
    """
    try:
        parsed = int(str(year).strip())
    except ValueError:
        raise InvalidRequestException("Year must be a valid number")

    current_year = date.today().year
    if parsed < MIN_MOVIE_YEAR or parsed > current_year:
        raise InvalidRequestException(f"Year must be between {MIN_MOVIE_YEAR} and {current_year}")
    return parsed


class MovieService:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    def list_movies(self) -> List[Movie]:
        return self.movie_repository.find_all()

    def get_movie(self, movie_id: int) -> Movie:
        movie = self.movie_repository.find_by_id(movie_id)
        if movie is None:
            raise ResourceNotFoundException(f"Movie {movie_id} not found")
        return movie

    def create_movie(
        self,
        title: str,
        genre: str,
        year: Union[int, str],
        description: Optional[str] = None,
        director: Optional[str] = None
    ) -> Movie:
        if _blank(title) or _blank(genre) or _blank(year):
            raise InvalidRequestException("Title, genre and year are required")

        movie = Movie(
            title=title.strip(),
            genre=genre.strip(),
            year=parse_movie_year(year),
            description=None if _blank(description) else description.strip(),
            director=None if _blank(director) else director.strip()
        )
        saved = self.movie_repository.save(movie)
        logger.info(f"Registered movie {saved}")
        return saved
