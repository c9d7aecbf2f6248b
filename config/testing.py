import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "presenze_test"),
}

THRESHOLD_HOURS = 8
STANDARD_DAILY_HOURS = 8
ABSENT_DAY_IMPLICIT_VACATION = False

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
