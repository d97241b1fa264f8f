import os

from .config import BONUS_RATE_PERCENT, CURRENCY_SYMBOL, DB_CONFIG, EXCEPTION_HOURS_PER_DAY, MAX_SHIFT_HOURS  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
