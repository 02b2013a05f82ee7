from pathlib import Path
import os
from dotenv import load_dotenv

from movie_catalog.config.paths import DB_FILE

env_path = Path(__file__).resolve().parent.parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv('DATABASE_URL', f"sqlite:///{DB_FILE}")
if not DATABASE_URL.startswith('sqlite'):
    raise ValueError("DATABASE_URL must point to a local SQLite database")

SEED_ON_STARTUP = os.getenv('SEED_ON_STARTUP', 'true').lower() == 'true'

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
