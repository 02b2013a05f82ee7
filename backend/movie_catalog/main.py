from fastapi import FastAPI
import logging

from movie_catalog.config import VERSION, API_TITLE, API_DESCRIPTION
from movie_catalog.config.environment import SEED_ON_STARTUP
from movie_catalog.config.logging import setup_logging
from movie_catalog.db.database import init_db
from movie_catalog.scripts.seed_database import seed_if_empty
from movie_catalog.service.session_service import SessionService
from movie_catalog.controllers.auth_controller import router as auth_router
from movie_catalog.controllers.copy_controller import router as copy_router
from movie_catalog.controllers.movie_controller import router as movie_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=VERSION
)

# include controllers
app.include_router(auth_router)
app.include_router(copy_router)
app.include_router(movie_router)

# single-user application: one session for the whole process
app.state.session_service = SessionService()

@app.on_event("startup")
def startup_event():
    init_db()
    if SEED_ON_STARTUP:
        seed_if_empty()
    logger.info("Movie catalog started")

@app.get("/health")
def health_check():
    return {"status": "healthy"}
