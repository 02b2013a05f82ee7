from fastapi import Depends, Request
from sqlalchemy.orm import sessionmaker

from movie_catalog.db.database import get_session_factory
from movie_catalog.repositories import SQLAlchemyUserRepo, SQLAlchemyMovieRepo, SQLAlchemyCopyRepo
from movie_catalog.service.auth_service import AuthService
from movie_catalog.service.copy_service import CopyService
from movie_catalog.service.movie_service import MovieService
from movie_catalog.service.session_service import SessionService

def get_session_service(request: Request) -> SessionService:
    return request.app.state.session_service

def get_auth_service(session_factory: sessionmaker = Depends(get_session_factory)) -> AuthService:
    return AuthService(SQLAlchemyUserRepo(session_factory))

def get_copy_service(session_factory: sessionmaker = Depends(get_session_factory)) -> CopyService:
    return CopyService(
        copy_repository=SQLAlchemyCopyRepo(session_factory),
        movie_repository=SQLAlchemyMovieRepo(session_factory)
    )

def get_movie_service(session_factory: sessionmaker = Depends(get_session_factory)) -> MovieService:
    return MovieService(SQLAlchemyMovieRepo(session_factory))
