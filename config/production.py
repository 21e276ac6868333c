import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr201"),
}

PUNCH_DB_CONFIG = {
    "host": os.getenv("PUNCH_DB_HOST", DB_CONFIG["host"]),
    "port": int(os.getenv("PUNCH_DB_PORT", str(DB_CONFIG["port"]))),
    "user": os.getenv("PUNCH_DB_USER", DB_CONFIG["user"]),
    "password": os.getenv("PUNCH_DB_PASSWORD", DB_CONFIG["password"]),
    "database": os.getenv("PUNCH_DB_NAME", DB_CONFIG["database"]),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
