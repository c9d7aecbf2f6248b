import os

from config import env_flag, env_hours

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "presenze_db"),
}

# No defaults: the deployment must choose these (the app refuses to start otherwise).
THRESHOLD_HOURS = env_hours("THRESHOLD_HOURS")
STANDARD_DAILY_HOURS = env_hours("STANDARD_DAILY_HOURS")
ABSENT_DAY_IMPLICIT_VACATION = env_flag("ABSENT_DAY_IMPLICIT_VACATION")

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB")
