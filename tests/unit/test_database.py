"""Tests for database session management."""

from unittest.mock import MagicMock

from sqlalchemy import text

from northwind import database


def test_get_db_yields_working_session():
    dependency = database.get_db()
    db = next(dependency)

    assert db.execute(text("SELECT 1")).scalar() == 1
    dependency.close()


def test_get_db_closes_session_when_exhausted(monkeypatch):
    session = MagicMock()
    monkeypatch.setattr(database, "SessionLocal", MagicMock(return_value=session))

    dependency = database.get_db()
    assert next(dependency) is session
    session.close.assert_not_called()

    assert next(dependency, None) is None
    session.close.assert_called_once()


def test_build_engine_keeps_sqlite_plain():
    """Pool and lock options are only applied to PostgreSQL URLs."""
    engine = database.build_engine("sqlite://")

    assert engine.dialect.name == "sqlite"
    engine.dispose()
