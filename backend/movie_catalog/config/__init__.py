from movie_catalog.config.paths import *
from movie_catalog.config.catalog import *

VERSION = "0.1.0"
API_TITLE = "Movie Copy Catalog API"
API_DESCRIPTION = "API for managing a personal catalog of physical movie copies"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config():
    from movie_catalog.config.environment import LOG_LEVEL

    if MIN_MOVIE_YEAR < 1:
        raise ValueError("MIN_MOVIE_YEAR must be positive")
    if LOG_LEVEL not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


validate_config()
