from datetime import datetime, timedelta, timezone
from jose import jwt
from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt solo usa 72 bytes de input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    if password and len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError("Password too long for bcrypt (max 72 bytes).")
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    # si te pasas de 72 bytes, passlib/bcrypt puede lanzar ValueError
    try:
        if password and len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return False
        return pwd_context.verify(password, hashed)
    except ValueError:
        return False


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": subject, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
