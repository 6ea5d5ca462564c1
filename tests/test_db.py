"""Tests for database URL handling and engine construction."""

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from productivepro.db import _normalize_database_url, make_engine, make_session_factory


class TestDatabaseUrl:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("postgres://u:p@db/app", "postgresql+psycopg://u:p@db/app"),
            ("postgresql://u:p@db/app", "postgresql+psycopg://u:p@db/app"),
            ("postgresql+psycopg://u:p@db/app", "postgresql+psycopg://u:p@db/app"),
            (" sqlite:///./local.db ", "sqlite:///./local.db"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert _normalize_database_url(raw) == expected


class TestMakeEngine:
    def test_sqlite_engine_runs_queries(self) -> None:
        engine = make_engine("sqlite://", poolclass=StaticPool)
        try:
            with make_session_factory(engine)() as db:
                assert db.execute(text("SELECT 1")).scalar() == 1
        finally:
            engine.dispose()

    def test_overrides_apply(self) -> None:
        engine = make_engine("sqlite://", echo=True)
        try:
            assert engine.echo is True
        finally:
            engine.dispose()
