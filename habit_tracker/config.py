import os

# ----- Configuration -----
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./habit_tracker.db")
SQL_ECHO = os.environ.get("SQL_ECHO", "0").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8000))
