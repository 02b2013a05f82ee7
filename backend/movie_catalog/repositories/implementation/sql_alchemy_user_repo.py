from typing import Optional
from sqlalchemy.exc import IntegrityError

from movie_catalog.domain.models import User
from movie_catalog.db.models import UserORM
from movie_catalog.repositories.interface.user_repository import UserRepository
from movie_catalog.repositories.implementation.sql_alchemy_repo import SQLAlchemyRepo
from movie_catalog.exceptions.repository import DuplicateEntityException, RepositoryException

class SQLAlchemyUserRepo(SQLAlchemyRepo[User, UserORM], UserRepository):
    orm_class = UserORM
    entity_name = "User"

    def _to_domain(self, user_orm: UserORM) -> User:
        return User(
            id=user_orm.id,
            username=user_orm.username,
            password=user_orm.password,
            is_admin=user_orm.is_admin
        )
    
    def _to_orm(self, user: User) -> UserORM:
        return UserORM(
            id=user.id,
            username=user.username,
            password=user.password,
            is_admin=user.is_admin
        )

    def _apply(self, user_orm: UserORM, user: User) -> None:
        user_orm.username = user.username
        user_orm.password = user.password
        user_orm.is_admin = user.is_admin

    def _integrity_error(self, error: IntegrityError) -> RepositoryException:
        if "UNIQUE" in str(error.orig).upper():
            return DuplicateEntityException("User already exists with this username")
        return super()._integrity_error(error)

    def find_by_username(self, username: str) -> Optional[User]:
        """Get a user by username"""
        users = self._find_where(UserORM.username == username)
        return users[0] if users else None
