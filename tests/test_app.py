"""
Application lifecycle: startup creates the store, shutdown releases it.
"""

import pytest
from unittest.mock import AsyncMock, patch

from database.session import Database
from database.user_store import UserStore
from main import create_app


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_creates_database_and_tables(self, settings):
        app = create_app(settings)
        assert app.state.database is None

        with patch.object(Database, "dispose", AsyncMock()) as dispose:
            async with app.router.lifespan_context(app):
                db = app.state.database
                assert isinstance(db, Database)
                assert await db.ping()
                async with db.session_factory() as s:
                    assert await UserStore(s).find_by_email("a@x.com") is None
        dispose.assert_awaited_once()
        await db.engine.dispose()

    @pytest.mark.asyncio
    async def test_injected_database_is_not_disposed(self, settings, database):
        app = create_app(settings, database=database)
        with patch.object(database, "dispose", AsyncMock()) as dispose:
            async with app.router.lifespan_context(app):
                assert app.state.database is database
        dispose.assert_not_called()

    @pytest.mark.asyncio
    async def test_unreachable_store_does_not_abort_startup(self, settings):
        app = create_app(settings)
        with patch.object(Database, "ping", AsyncMock(return_value=False)), \
                patch.object(Database, "create_tables", AsyncMock()) as create_tables:
            async with app.router.lifespan_context(app):
                pass
        create_tables.assert_not_called()

    def test_hasher_uses_configured_rounds(self, settings):
        app = create_app(settings)
        assert app.state.password_hasher.rounds == 4
