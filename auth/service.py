"""
Signup and login flows.

``AuthService`` knows nothing about HTTP: it validates input, normalizes
the email, and delegates persistence to ``UserStore`` and hashing to
``PasswordHasher``. Routes map its errors to status codes.
"""

from __future__ import annotations

import asyncio
import logging

from auth.errors import DuplicateCredential, InvalidCredential, ValidationError
from auth.password import MAX_PASSWORD_BYTES, PasswordHasher
from database.models import User
from database.user_store import UserStore

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _require(*values: object, password: object) -> None:
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError()
    # Passwords are never trimmed; only emptiness is rejected.
    if not isinstance(password, str) or not password:
        raise ValidationError()


class AuthService:
    def __init__(self, store: UserStore, hasher: PasswordHasher) -> None:
        self.store = store
        self.hasher = hasher

    async def signup(self, name: str, email: str, password: str) -> User:
        """Create a user; raises ``DuplicateCredential`` if email or username is taken."""
        _require(name, email, password=password)
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        username = name.strip()
        email = normalize_email(email)

        existing = await self.store.find_by_email_or_username(email, username)
        if existing is not None:
            if existing.email == email:
                raise DuplicateCredential("Email already registered")
            raise DuplicateCredential("Username already taken")

        password_hash = await asyncio.to_thread(self.hasher.hash, password)
        user = await self.store.insert_user(username, email, password_hash)
        logger.info("Registered user %s (%s)", user.username, user.id)
        return user

    async def login(self, email: str, password: str) -> User:
        """Return the matching user; unknown email and wrong password fail alike."""
        _require(email, password=password)
        user = await self.store.find_by_email(normalize_email(email))

        if user is None or not await asyncio.to_thread(self.hasher.verify, password, user.password):
            raise InvalidCredential()

        logger.info("Login: %s (%s)", user.username, user.id)
        return user
