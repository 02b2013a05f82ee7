import logging
from typing import Iterable, List, Optional, Union

from movie_catalog.domain.models import Condition, Copy, Medium, User
from movie_catalog.repositories.interface.copy_repository import CopyRepository
from movie_catalog.repositories.interface.movie_repository import MovieRepository
from movie_catalog.exceptions.catalog import InvalidRequestException, ResourceNotFoundException

logger = logging.getLogger(__name__)


def filter_copies(copies: Iterable[Copy], prefix: Optional[str]) -> List[Copy]:
    """Keep the copies whose movie title starts with ``prefix``, ignoring case.

    An empty prefix keeps everything; the input order is preserved.
    """
    needle = (prefix or "").strip().lower()
    if not needle:
        return list(copies)
    return [
        copy for copy in copies
        if copy.movie is not None
        and copy.movie.title is not None
        and copy.movie.title.lower().startswith(needle)
    ]


def _parse_condition(value: Union[str, Condition]) -> Condition:
    try:
        return Condition(value)
    except ValueError:
        allowed = ", ".join(c.value for c in Condition)
        raise InvalidRequestException(f"Condition must be one of: {allowed}")


def _parse_medium(value: Union[str, Medium]) -> Medium:
    try:
        return Medium(value)
    except ValueError:
        allowed = ", ".join(m.value for m in Medium)
        raise InvalidRequestException(f"Medium must be one of: {allowed}")


class CopyService:
    def __init__(self, copy_repository: CopyRepository, movie_repository: MovieRepository):
        self.copy_repository = copy_repository
        self.movie_repository = movie_repository

    def list_user_copies(self, user: User, search: Optional[str] = None) -> List[Copy]:
        return filter_copies(self.copy_repository.find_by_owner(user), search)

    def get_user_copy(self, user: User, copy_id: int) -> Copy:
        copy = self.copy_repository.find_by_id(copy_id)
        if copy is None or copy.user_id != user.id:
            raise ResourceNotFoundException(f"Copy {copy_id} not found")
        return copy

    def add_copy(self, user: User, movie_id: int, condition: str, medium: str) -> Copy:
        if movie_id is None or condition is None or medium is None:
            raise InvalidRequestException("Movie, condition and medium are required")

        movie = self.movie_repository.find_by_id(movie_id)
        if movie is None:
            raise InvalidRequestException(f"Movie with ID {movie_id} not found")

        copy = Copy(
            movie_id=movie.id,
            user_id=user.id,
            condition=_parse_condition(condition),
            medium=_parse_medium(medium)
        )
        saved = self.copy_repository.save(copy)
        logger.info(f"User {user.username} added copy {saved.id} of {movie}")
        return saved

    def update_copy(
        self,
        user: User,
        copy_id: int,
        condition: str,
        medium: str,
        movie_id: Optional[int] = None
    ) -> Copy:
        copy = self.get_user_copy(user, copy_id)
        if movie_id is not None and movie_id != copy.movie_id:
            raise InvalidRequestException("The movie of an existing copy cannot be changed")

        copy.condition = _parse_condition(condition)
        copy.medium = _parse_medium(medium)
        saved = self.copy_repository.save(copy)
        logger.info(f"User {user.username} updated copy {saved.id}")
        return saved

    def delete_copy(self, user: User, copy_id: int) -> Copy:
        copy = self.get_user_copy(user, copy_id)
        removed = self.copy_repository.delete(copy)
        if removed is None:
            raise ResourceNotFoundException(f"Copy {copy_id} not found")
        logger.info(f"User {user.username} deleted copy {copy_id}")
        return removed
