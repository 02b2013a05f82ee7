from abc import abstractmethod
from typing import Optional

from movie_catalog.domain.models import User
from movie_catalog.repositories.interface.repository import Repository


class UserRepository(Repository[User, int]):
    @abstractmethod
    def find_by_username(self, username: str) -> Optional["User"]:
        pass
