import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.errors import InvalidToken, Unauthenticated
from app.models.user import User

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_user_id(
    creds: HTTPAuthorizationCredentials | None = Depends(security),
) -> int:
    # HTTPBearer ya separa esquema y token; sin header (o esquema != Bearer) llega None
    if creds is None:
        raise Unauthenticated("Token not provided")

    try:
        payload = jwt.decode(creds.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        sub = payload.get("sub")
        if not sub:
            raise InvalidToken()
        return int(sub)
    except (JWTError, ValueError, TypeError):
        logger.info("rejected bearer token")
        raise InvalidToken()


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    user = db.get(User, user_id)
    if not user:
        raise Unauthenticated("User does not exist")
    return user
