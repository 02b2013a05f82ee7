import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from movie_catalog.db.database import SessionLocal
from movie_catalog.db.models import UserORM, MovieORM, CopyORM
from movie_catalog.domain.models import Condition, Medium

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin"

SEED_MOVIES = [
    {
        "title": "El Señor de los Anillos: La Comunidad del Anillo",
        "genre": "Fantasía",
        "year": 2001,
        "director": "Peter Jackson",
        "description": "Un grupo de héroes intenta destruir el Anillo Único.",
    },
    {
        "title": "Matrix",
        "genre": "Ciencia ficción",
        "year": 1999,
        "director": "Lana y Lilly Wachowski",
        "description": "Un hacker descubre la verdadera naturaleza de su realidad.",
    },
    {
        "title": "El Padrino",
        "genre": "Drama",
        "year": 1972,
        "director": "Francis Ford Coppola",
        "description": "La historia de la familia Corleone en el mundo de la mafia.",
    },
]

# (condition, medium) of the admin's copy of each seed movie, same order as SEED_MOVIES
SEED_COPIES = [
    (Condition.NUEVA, Medium.BLU_RAY),
    (Condition.BUENA, Medium.DVD),
    (Condition.USADA, Medium.VHS),
]


def seed_if_empty(session_factory: Optional[sessionmaker] = None) -> bool:
    """Insert the demo admin, movies and copies when there are no users yet.

    Everything goes in one transaction. Errors are logged and swallowed.

    Returns:
        bool: True when data was inserted
    """
    db_session = (session_factory or SessionLocal)()

    try:
        if db_session.scalar(select(func.count()).select_from(UserORM)):
            logger.info("Database already has users, skipping seed")
            return False

        admin = UserORM(username=ADMIN_USERNAME, password=ADMIN_PASSWORD, is_admin=True)
        db_session.add(admin)

        for movie_data, (condition, medium) in zip(SEED_MOVIES, SEED_COPIES):
            movie = MovieORM(**movie_data)
            db_session.add(movie)
            db_session.add(CopyORM(user=admin, movie=movie, condition=condition, medium=medium))

        db_session.commit()
        logger.info(f"Seeded database with user {ADMIN_USERNAME!r}, {len(SEED_MOVIES)} movies and {len(SEED_COPIES)} copies")
        return True
    except Exception as e:
        db_session.rollback()
        logger.error(f"Error seeding database: {str(e)}")
        return False
    finally:
        db_session.close()


if __name__ == "__main__":
    from movie_catalog.config.logging import setup_logging
    from movie_catalog.db.database import init_db

    setup_logging()
    init_db()
    seed_if_empty()
