SECRET_KEY = "test-secret"

SCHEDULE_DEFAULTS = {
    "startTime": "09:00",
    "endTime": "18:00",
    "breakTime": 60,
    "standardWorkTime": 8,
    "lateThreshold": 0,
}

CLOSING_DAY = 25
EXPECTED_WORKING_DAYS = 20
WEEKEND_DAYS = [5, 6]
HOLIDAYS = []
TIMEZONE = "+09:00"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
