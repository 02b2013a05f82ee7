from movie_catalog.db.models import MovieORM
from movie_catalog.domain.models import Movie
from movie_catalog.repositories.interface.movie_repository import MovieRepository
from movie_catalog.repositories.implementation.sql_alchemy_repo import SQLAlchemyRepo


def movie_to_domain(movie_orm: MovieORM) -> Movie:
    return Movie(
        id=movie_orm.id,
        title=movie_orm.title,
        genre=movie_orm.genre,
        year=movie_orm.year,
        description=movie_orm.description,
        director=movie_orm.director
    )


class SQLAlchemyMovieRepo(SQLAlchemyRepo[Movie, MovieORM], MovieRepository):
    orm_class = MovieORM
    entity_name = "Movie"

    def _to_domain(self, movie_orm: MovieORM) -> Movie:
        return movie_to_domain(movie_orm)

    def _to_orm(self, movie: Movie) -> MovieORM:
        return MovieORM(
            id=movie.id,
            title=movie.title,
            genre=movie.genre,
            year=movie.year,
            description=movie.description,
            director=movie.director
        )

    def _apply(self, movie_orm: MovieORM, movie: Movie) -> None:
        movie_orm.title = movie.title
        movie_orm.genre = movie.genre
        movie_orm.year = movie.year
        movie_orm.description = movie.description
        movie_orm.director = movie.director
