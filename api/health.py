"""
Liveness routes.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/")
async def root(request: Request) -> Dict[str, Any]:
    return {"status": "ok", "service": request.app.state.settings.app_name}


@router.get("/health")
async def health(request: Request) -> Dict[str, Any]:
    """Always 200 while the process is up; reports store reachability."""
    db_ok = await request.app.state.database.ping()
    return {"status": "ok", "database": "ok" if db_ok else "unreachable"}
