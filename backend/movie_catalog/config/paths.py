from pathlib import Path


ROOT_DIR = Path(__file__).parent.parent.parent.parent


DATA_DIR = ROOT_DIR / "data"
LOGS_DIR = ROOT_DIR / "logs"

# Embedded database file
DB_FILE = DATA_DIR / "data.db"
