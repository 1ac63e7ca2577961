from __future__ import annotations

from fastapi import APIRouter, Depends

from fintrack.api.deps import get_current_user
from fintrack.models.user import User
from fintrack.schemas.user import UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)) -> User:
    return current_user
