"""
FastAPI dependencies for authentication.

Builds an ``AuthService`` per request from the request's DB session and
the application's shared ``PasswordHasher``.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import PasswordHasher
from auth.service import AuthService
from database.session import get_db_session
from database.user_store import UserStore


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(UserStore(session), hasher)
