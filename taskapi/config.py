import os

SECRET = os.environ.get("SECRET", "")
ALGORITHM = "HS256"
TOKEN_EXPIRE_HOURS = 12
COOKIE_EXPIRE_HOURS = 24
BCRYPT_ROUNDS = 10

# Front-end origin allowed by CORS, in addition to the local dev server
FE_URL = os.environ.get("FE_URL", "")
ALLOWED_ORIGINS = [o for o in ("http://localhost:3000", FE_URL) if o]

# Empty means a host-only cookie
API_DOMAIN = os.environ.get("API_DOMAIN", "")

CSRF_COOKIE_NAME = "_csrf"
CSRF_HEADER_NAME = "X-CSRF-Token"
CSRF_TOKEN_LENGTH = 32
CSRF_COOKIE_MAX_AGE = 86400

# Default to local SQLite for dev/tests; override via env in Docker/Prod
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./tasks.db")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8080))
