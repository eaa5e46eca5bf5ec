# terraweave/config.py
# Runtime settings, read once from the environment.
import os

# Relative to the working directory the server is started from
DATABASE_URL = os.environ.get("TERRAWEAVE_DATABASE_URL", "sqlite:///./data/terraweave.db")

# Token signing
JWT_SECRET = os.environ.get("JWT_SECRET", "terraweave-nasa-hackathon-2024")
JWT_ALGORITHM = "HS256"
TOKEN_TTL_HOURS = int(os.environ.get("TOKEN_TTL_HOURS", "24"))

# When enabled, any password is accepted for a known email (demo shortcut)
DEMO_LOGIN = os.environ.get("TERRAWEAVE_DEMO_LOGIN", "false").lower() in ("1", "true", "yes")

# Seeded demo account
ADMIN_EMAIL = os.environ.get("TERRAWEAVE_ADMIN_EMAIL", "admin@terraweave.com")
ADMIN_PASSWORD = os.environ.get("TERRAWEAVE_ADMIN_PASSWORD", "terraweave")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")
