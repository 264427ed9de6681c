"""
Auth API routes — signup, login.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field

from auth.dependencies import get_auth_service
from auth.errors import AuthError, UnexpectedFailure
from auth.service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class SignupRequest(BaseModel):
    name: str = Field(..., validation_alias=AliasChoices("name", "username"))
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class SignupResponse(BaseModel):
    model_config = {"populate_by_name": True}

    message: str
    user_id: int = Field(..., alias="userId")


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime


class LoginResponse(BaseModel):
    message: str
    user: UserOut


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    req: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user."""
    try:
        user = await service.signup(req.name, req.email, req.password)
    except AuthError:
        raise
    except Exception as exc:
        logger.exception("Signup error")
        raise UnexpectedFailure("Signup failed", detail=str(exc)) from exc

    return {"message": "User registered successfully", "userId": user.id}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    try:
        user = await service.login(req.email, req.password)
    except AuthError:
        raise
    except Exception as exc:
        logger.exception("Login error")
        raise UnexpectedFailure("Login failed", detail=str(exc)) from exc

    return {
        "message": "Login successful",
        "user": {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "created_at": user.created_at,
        },
    }
