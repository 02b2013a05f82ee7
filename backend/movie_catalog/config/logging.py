import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from movie_catalog.config.paths import LOGS_DIR
from movie_catalog.config.environment import LOG_LEVEL

CATALOG_LOG = LOGS_DIR / "catalog.log"
ERROR_LOG = LOGS_DIR / "catalog-error.log"

MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 1

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging():
    root_logger = logging.getLogger()
    # main.py calls this at import time; keep a re-import from stacking handlers
    if getattr(root_logger, "_catalog_configured", False):
        return

    LOGS_DIR.mkdir(exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(formatter)

    root_logger.setLevel(LOG_LEVEL)
    root_logger.addHandler(_rotating_handler(CATALOG_LOG, logging.INFO, formatter))
    root_logger.addHandler(_rotating_handler(ERROR_LOG, logging.ERROR, formatter))
    root_logger.addHandler(console_handler)
    root_logger._catalog_configured = True

    # SQL echo stays off unless asked for explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.info(f"Logging initialized at level {LOG_LEVEL}, files in {LOGS_DIR}")
