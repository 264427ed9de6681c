"""
Queries against the ``users`` table.

The unique constraints on ``email`` and ``username`` are what actually
enforce uniqueness; the lookup in ``find_by_email_or_username`` only
short-circuits the common case.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import DuplicateCredential
from database.models import User

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        if not email or not username:
            raise ValueError("email and username must be non-empty")
        result = await self.session.execute(
            select(User)
            .where(or_(User.email == email, User.username == username))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def insert_user(self, username: str, email: str, password_hash: str) -> User:
        """
        Insert and commit a new user row.

        Raises ``DuplicateCredential`` when a unique constraint rejects the
        row, which happens when a concurrent signup won the race.
        """
        user = User(username=username, email=email, password=password_hash)
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.debug("Insert rejected by unique constraint: %s", exc.orig)
            raise DuplicateCredential("Email or username already registered") from exc
        await self.session.refresh(user)
        return user
