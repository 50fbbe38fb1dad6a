"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "transaction_tracker")
DB_USER: str = os.getenv("DB_USER", "tracker_user")
DB_PASS: str = os.getenv("DB_PASS", "")

# A full URL wins over the individual parts; "sqlite:///path.db" selects SQLite.
DATABASE_URL: str = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
SQL_TRACE: bool = os.getenv("SQL_TRACE", "false").strip().lower() in ("1", "true", "yes")
