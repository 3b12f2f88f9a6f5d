import os

from config.config import CLOSING_DAY, EXPECTED_WORKING_DAYS, HOLIDAYS, SCHEDULE_DEFAULTS, TIMEZONE, WEEKEND_DAYS

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

__all__ = [
    "CLOSING_DAY",
    "DEBUG",
    "EXPECTED_WORKING_DAYS",
    "HOLIDAYS",
    "LOG_LEVEL",
    "SCHEDULE_DEFAULTS",
    "SECRET_KEY",
    "TIMEZONE",
    "WEEKEND_DAYS",
]
