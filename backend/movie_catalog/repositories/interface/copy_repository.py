from abc import abstractmethod
from typing import List

from movie_catalog.domain.models import Copy, Movie, User
from movie_catalog.repositories.interface.repository import Repository


class CopyRepository(Repository[Copy, int]):
    @abstractmethod
    def find_by_owner(self, user: "User") -> List["Copy"]:
        pass

    @abstractmethod
    def find_by_movie(self, movie: "Movie") -> List["Copy"]:
        pass
