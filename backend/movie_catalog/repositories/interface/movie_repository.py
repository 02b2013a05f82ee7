from movie_catalog.domain.models import Movie
from movie_catalog.repositories.interface.repository import Repository


class MovieRepository(Repository[Movie, int]):
    pass
