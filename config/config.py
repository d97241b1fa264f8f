"""Settings shared by every environment module."""

import os


def _optional_float(name: str):
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "business-manager-dev-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "business_db")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Payroll
    EXCEPTION_HOURS_PER_DAY = float(os.environ.get("EXCEPTION_HOURS_PER_DAY", "1.0"))
    BONUS_RATE_PERCENT = float(os.environ.get("BONUS_RATE_PERCENT", "8.33"))
    # Unset: any check-out earlier than check-in is an overnight shift.
    MAX_SHIFT_HOURS = _optional_float("MAX_SHIFT_HOURS")
    CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "₹")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}

EXCEPTION_HOURS_PER_DAY = Config.EXCEPTION_HOURS_PER_DAY
BONUS_RATE_PERCENT = Config.BONUS_RATE_PERCENT
MAX_SHIFT_HOURS = Config.MAX_SHIFT_HOURS
CURRENCY_SYMBOL = Config.CURRENCY_SYMBOL
