from movie_catalog.repositories.interface.repository import Repository
from movie_catalog.repositories.interface.user_repository import UserRepository
from movie_catalog.repositories.interface.movie_repository import MovieRepository
from movie_catalog.repositories.interface.copy_repository import CopyRepository
from movie_catalog.repositories.implementation.sql_alchemy_repo import SQLAlchemyRepo
from movie_catalog.repositories.implementation.sql_alchemy_user_repo import SQLAlchemyUserRepo
from movie_catalog.repositories.implementation.sql_alchemy_movie_repo import SQLAlchemyMovieRepo
from movie_catalog.repositories.implementation.sql_alchemy_copy_repo import SQLAlchemyCopyRepo

__all__ = [
    "Repository",
    "UserRepository",
    "MovieRepository",
    "CopyRepository",
    "SQLAlchemyRepo",
    "SQLAlchemyUserRepo",
    "SQLAlchemyMovieRepo",
    "SQLAlchemyCopyRepo",
]
