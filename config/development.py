import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# HR records: employees, shift assignments, approvals, computed DTR
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr201"),
}

# Biometric punch store (CHECKINOUT); falls back to the HR database settings
PUNCH_DB_CONFIG = {
    "host": os.getenv("PUNCH_DB_HOST", DB_CONFIG["host"]),
    "port": int(os.getenv("PUNCH_DB_PORT", str(DB_CONFIG["port"]))),
    "user": os.getenv("PUNCH_DB_USER", DB_CONFIG["user"]),
    "password": os.getenv("PUNCH_DB_PASSWORD", DB_CONFIG["password"]),
    "database": os.getenv("PUNCH_DB_NAME", DB_CONFIG["database"]),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
