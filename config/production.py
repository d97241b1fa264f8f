import os

from .config import BONUS_RATE_PERCENT, CURRENCY_SYMBOL, DB_CONFIG, EXCEPTION_HOURS_PER_DAY, MAX_SHIFT_HOURS  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
