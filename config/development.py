import os

from config import env_flag, env_hours

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "presenze_db"),
}

# Accounting rules (ore soglia, ore standard, ferie implicite nei giorni senza dati)
THRESHOLD_HOURS = env_hours("THRESHOLD_HOURS", 8)
STANDARD_DAILY_HOURS = env_hours("STANDARD_DAILY_HOURS", 8)
ABSENT_DAY_IMPLICIT_VACATION = env_flag("ABSENT_DAY_IMPLICIT_VACATION")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
