from __future__ import annotations

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.config import settings
from fintrack.database import get_db
from fintrack.models.user import User
from fintrack.reporting.clock import Clock, SystemClock
from fintrack.services.auth_service import decode_access_token, get_user_by_id
from fintrack.services.record_store import RecordStore, SqlRecordStore

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise unauthorized

    user = await get_user_by_id(db, user_id)
    if user is None or not user.is_active:
        raise unauthorized
    return user


def get_clock() -> Clock:
    return SystemClock(settings.TIMEZONE)


def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return SqlRecordStore(db, tz=settings.TIMEZONE)
