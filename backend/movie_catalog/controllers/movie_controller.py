import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from movie_catalog.domain.dto import MovieCreate, MovieResponse
from movie_catalog.domain.models import User
from movie_catalog.auth.dependencies import get_current_user, get_current_admin_user
from movie_catalog.service.dependencies import get_movie_service
from movie_catalog.service.movie_service import MovieService
from movie_catalog.exceptions.catalog import InvalidRequestException, ResourceNotFoundException
from movie_catalog.exceptions.repository import RepositoryException

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    responses={404: {"description": "Not found"}}
)


@router.get("", response_model=List[MovieResponse])
def list_movies(
    current_user: User = Depends(get_current_user),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return [MovieResponse.from_domain(movie) for movie in movie_service.list_movies()]
    except RepositoryException as e:
        logger.error(f"Failed to list movies: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to list movies")


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: int,
    current_user: User = Depends(get_current_user),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return MovieResponse.from_domain(movie_service.get_movie(movie_id))
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MovieResponse)
def create_movie(
    movie_data: MovieCreate,
    admin: User = Depends(get_current_admin_user),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        movie = movie_service.create_movie(
            title=movie_data.title,
            genre=movie_data.genre,
            year=movie_data.year,
            description=movie_data.description,
            director=movie_data.director
        )
        return MovieResponse.from_domain(movie)
    except InvalidRequestException as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RepositoryException as e:
        logger.error(f"Failed to create movie: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create movie")
