"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettings:
    def test_defaults(self):
        s = _settings()
        assert s.port == 3001
        assert s.bcrypt_rounds == 12
        assert s.cors_origin_list == ["*"]
        assert not s.is_sqlite

    @pytest.mark.parametrize("url", ["postgres://u:p@db:5432/app", "postgresql://u:p@db:5432/app"])
    def test_plain_postgres_url_gets_async_driver(self, url):
        assert _settings(database_url=url).database_url == "postgresql+asyncpg://u:p@db:5432/app"

    def test_sqlite_url_untouched(self):
        s = _settings(database_url="sqlite+aiosqlite:///./app.db")
        assert s.database_url == "sqlite+aiosqlite:///./app.db"
        assert s.is_sqlite

    def test_cors_origins_are_split(self):
        s = _settings(cors_origins="https://a.example, https://b.example,")
        assert s.cors_origin_list == ["https://a.example", "https://b.example"]

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_out_of_range(self, rounds):
        with pytest.raises(ValidationError):
            _settings(bcrypt_rounds=rounds)

    def test_port_out_of_range(self):
        with pytest.raises(ValidationError):
            _settings(port=0)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("BCRYPT_ROUNDS", "10")
        s = _settings()
        assert s.port == 8080
        assert s.bcrypt_rounds == 10
