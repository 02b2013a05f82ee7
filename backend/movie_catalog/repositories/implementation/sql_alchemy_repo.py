import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from movie_catalog.db.database import Base
from movie_catalog.repositories.interface.repository import Repository
from movie_catalog.exceptions.repository import (
    RepositoryException,
    EntityNotFoundException,
    InvalidEntityDataException,
    RepositoryOperationException,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=Base)


class SQLAlchemyRepo(Repository[T, int], Generic[T, M]):
    """Generic CRUD over one ORM table.

    Subclasses set ``orm_class`` and ``entity_name`` and provide the mapping
    between the ORM row and the domain object. Extra queries go through
    ``_unit_of_work`` like the base operations do.
    """

    orm_class: Type[M]
    entity_name: str = "Entity"

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _to_domain(self, orm_obj: M) -> T:
        raise NotImplementedError

    def _to_orm(self, entity: T) -> M:
        raise NotImplementedError

    def _apply(self, orm_obj: M, entity: T) -> None:
        """Copy the entity's mutable fields onto a stored row."""
        raise NotImplementedError

    def _integrity_error(self, error: IntegrityError) -> RepositoryException:
        return InvalidEntityDataException(
            f"{self.entity_name} violates a storage constraint: {error.orig}"
        )

    @contextmanager
    def _unit_of_work(self) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def save(self, entity: T) -> T:
        try:
            with self._unit_of_work() as session:
                if entity.id is None:
                    orm_obj = self._to_orm(entity)
                    session.add(orm_obj)
                else:
                    orm_obj = session.get(self.orm_class, entity.id)
                    if orm_obj is None:
                        raise EntityNotFoundException(f"{self.entity_name} {entity.id} not found")
                    self._apply(orm_obj, entity)
                session.flush()
                session.refresh(orm_obj)
                saved = self._to_domain(orm_obj)
            logger.debug(f"Saved {self.entity_name} {saved.id}")
            return saved
        except IntegrityError as e:
            raise self._integrity_error(e)
        except RepositoryException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to save {self.entity_name}: {str(e)}")

    def delete(self, entity: T) -> Optional[T]:
        if entity.id is None:
            return None
        try:
            with self._unit_of_work() as session:
                # reconcile with the stored row before removing it
                orm_obj = session.get(self.orm_class, entity.id)
                if orm_obj is None:
                    return None
                removed = self._to_domain(orm_obj)
                session.delete(orm_obj)
            logger.debug(f"Deleted {self.entity_name} {removed.id}")
            return removed
        except IntegrityError as e:
            raise self._integrity_error(e)
        except RepositoryException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to delete {self.entity_name}: {str(e)}")

    def delete_by_id(self, entity_id: int) -> Optional[T]:
        entity = self.find_by_id(entity_id)
        if entity is None:
            return None
        return self.delete(entity)

    def find_by_id(self, entity_id: int) -> Optional[T]:
        if not isinstance(entity_id, int):
            raise RepositoryOperationException(
                f"Invalid {self.entity_name} id type. Expected int, got {type(entity_id)}"
            )
        try:
            with self._unit_of_work() as session:
                orm_obj = session.get(self.orm_class, entity_id)
                return self._to_domain(orm_obj) if orm_obj else None
        except RepositoryException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get {self.entity_name} by ID: {str(e)}")

    def find_all(self) -> List[T]:
        return self._find_where()

    def count(self) -> int:
        try:
            with self._unit_of_work() as session:
                return session.scalar(select(func.count()).select_from(self.orm_class))
        except Exception as e:
            raise RepositoryOperationException(f"Failed to count {self.entity_name} rows: {str(e)}")

    def _find_where(self, *criteria: Any) -> List[T]:
        """Equality-filter helper for the entity-specific queries."""
        stmt = select(self.orm_class)
        if criteria:
            stmt = stmt.where(*criteria)
        try:
            with self._unit_of_work() as session:
                rows = session.scalars(stmt).unique().all()
                return [self._to_domain(row) for row in rows]
        except RepositoryException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to query {self.entity_name} rows: {str(e)}")
