# terraweave/security.py
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
import jwt

from . import config
from .errors import AuthError

pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password):
    return pwd_ctx.hash(password)


def verify_password(password, password_hash):
    if not password_hash:
        return False
    try:
        return pwd_ctx.verify(password, password_hash)
    except ValueError:
        # stored value is not a recognised hash
        return False


def create_access_token(user, now=None, secret=None, ttl_hours=None):
    """Sign a token carrying the user id and email, valid for ``ttl_hours``."""
    now = now or datetime.now(timezone.utc)
    ttl = timedelta(hours=config.TOKEN_TTL_HOURS if ttl_hours is None else ttl_hours)
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(claims, secret or config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token, secret=None):
    try:
        return jwt.decode(token, secret or config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")
