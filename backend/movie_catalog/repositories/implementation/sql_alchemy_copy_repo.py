from typing import List

from movie_catalog.db.models import CopyORM
from movie_catalog.domain.models import Condition, Copy, Medium, Movie, User
from movie_catalog.repositories.interface.copy_repository import CopyRepository
from movie_catalog.repositories.implementation.sql_alchemy_repo import SQLAlchemyRepo
from movie_catalog.repositories.implementation.sql_alchemy_movie_repo import movie_to_domain
from movie_catalog.exceptions.repository import InvalidEntityDataException


class SQLAlchemyCopyRepo(SQLAlchemyRepo[Copy, CopyORM], CopyRepository):
    orm_class = CopyORM
    entity_name = "Copy"

    def _to_domain(self, copy_orm: CopyORM) -> Copy:
        return Copy(
            id=copy_orm.id,
            movie_id=copy_orm.movie_id,
            user_id=copy_orm.user_id,
            condition=Condition(copy_orm.condition),
            medium=Medium(copy_orm.medium),
            movie=movie_to_domain(copy_orm.movie) if copy_orm.movie else None
        )

    def _validate(self, copy: Copy) -> None:
        if copy.movie_id is None:
            raise InvalidEntityDataException("Copy must reference a movie")
        if copy.user_id is None:
            raise InvalidEntityDataException("Copy must have an owner")
        try:
            Condition(copy.condition)
            Medium(copy.medium)
        except ValueError as e:
            raise InvalidEntityDataException(f"Invalid copy data: {str(e)}")

    def _to_orm(self, copy: Copy) -> CopyORM:
        self._validate(copy)
        return CopyORM(
            id=copy.id,
            movie_id=copy.movie_id,
            user_id=copy.user_id,
            condition=Condition(copy.condition),
            medium=Medium(copy.medium)
        )

    def _apply(self, copy_orm: CopyORM, copy: Copy) -> None:
        self._validate(copy)
        copy_orm.movie_id = copy.movie_id
        copy_orm.user_id = copy.user_id
        copy_orm.condition = Condition(copy.condition)
        copy_orm.medium = Medium(copy.medium)

    def find_by_owner(self, user: User) -> List[Copy]:
        return self._find_where(CopyORM.user_id == user.id)

    def find_by_movie(self, movie: Movie) -> List[Copy]:
        return self._find_where(CopyORM.movie_id == movie.id)
