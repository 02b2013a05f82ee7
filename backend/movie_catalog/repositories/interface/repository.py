from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """CRUD contract shared by every entity repository.

    Implementations run each call in its own unit of work: nothing is kept
    open between calls and there is no atomicity across calls.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert the entity when it has no id, otherwise update the stored row.

        An id with no stored row is not inserted: implementations raise
        ``EntityNotFoundException`` instead.
        """
        pass

    @abstractmethod
    def delete(self, entity: T) -> Optional[T]:
        """Remove the entity; returns it, or None when it was not stored."""
        pass

    @abstractmethod
    def delete_by_id(self, entity_id: ID) -> Optional[T]:
        pass

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> Optional[T]:
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
