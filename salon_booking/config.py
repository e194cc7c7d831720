import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./salon.db")

# "sql" persists records through SQLAlchemy, "memory" keeps them in process
RECORD_STORE_BACKEND = os.getenv("RECORD_STORE_BACKEND", "sql").lower()

# Seed the default catalog and admin account on startup
SEED_DEFAULTS = _env_flag("SEED_DEFAULTS", "true")
DEFAULT_ADMIN_NAME = os.getenv("DEFAULT_ADMIN_NAME", "Mestre Barbeiro")
DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@salon.com")
DEFAULT_ADMIN_PHONE = os.getenv("DEFAULT_ADMIN_PHONE", "11999999999")
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD")
if not DEFAULT_ADMIN_PASSWORD:
    import warnings

    warnings.warn(
        "DEFAULT_ADMIN_PASSWORD not set! Seeding admin with the demo password - DO NOT USE IN PRODUCTION",
        RuntimeWarning,
        stacklevel=2,
    )
    DEFAULT_ADMIN_PASSWORD = "123"  # noqa: S105 - Dev fallback only

# Password hashing cost (lower it in tests only)
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Scheduling lock - shared through Redis when REDIS_URL is set, process-local otherwise
REDIS_URL = os.getenv("REDIS_URL")
SCHEDULING_LOCK_NAME = os.getenv("SCHEDULING_LOCK_NAME", "scheduling:salon")
SCHEDULING_LOCK_TIMEOUT_SECONDS = float(os.getenv("SCHEDULING_LOCK_TIMEOUT_SECONDS", "30"))
SCHEDULING_LOCK_WAIT_SECONDS = float(os.getenv("SCHEDULING_LOCK_WAIT_SECONDS", "10"))
# How often a worker on the local fallback tries to reach Redis again
SCHEDULING_LOCK_REDIS_RETRY_SECONDS = float(os.getenv("SCHEDULING_LOCK_REDIS_RETRY_SECONDS", "30"))

# Status update behaviour
# Strict lookup raises NotFoundError for unknown ids instead of silently ignoring them
APPOINTMENT_STRICT_STATUS_LOOKUP = _env_flag("APPOINTMENT_STRICT_STATUS_LOOKUP", "true")
ENFORCE_STATUS_TRANSITIONS = _env_flag("ENFORCE_STATUS_TRANSITIONS", "false")

# Gemini style advisor
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta/models"
)
GEMINI_TIMEOUT_SECONDS = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "20"))

# Frontend base URL (CORS and CSP)
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
