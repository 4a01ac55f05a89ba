"""Runtime configuration read from the environment (and an optional .env file)."""
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]

load_dotenv(ROOT_DIR / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{ROOT_DIR / 'studio.db'}")
SQL_ECHO = _env_flag("SQL_ECHO", "false")

# "sql" persists the document through SQLAlchemy, "memory" keeps it in process
STORE_BACKEND = os.getenv("STORE_BACKEND", "sql").lower()
STORAGE_KEY = os.getenv("STORAGE_KEY", "atria_fitness_data_v2")
SEED_ON_EMPTY = _env_flag("SEED_ON_EMPTY", "true")

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
