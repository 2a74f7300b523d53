"""Unit tests for the database engine helpers."""

from typing import TYPE_CHECKING

from sqlalchemy.engine import make_url

from circulation.adapters.db.engine import is_sqlite, make_engine

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_is_sqlite():
    """is_sqlite() recognises SQLite URLs as strings or URL objects."""
    assert is_sqlite("sqlite:///:memory:")
    assert is_sqlite(make_url("sqlite+pysqlite:///file.db"))
    assert not is_sqlite("postgresql://u:p@localhost/db")
    assert not is_sqlite(make_url("postgresql+psycopg://u:p@localhost/db"))


def test_make_engine_points_at_url(sqlite_engine_file: "Engine"):
    """make_engine() builds an engine for the given file URL."""
    assert sqlite_engine_file.url.database is not None
    assert sqlite_engine_file.url.database.endswith("test.db")


def test_sqlite_pragmas_applied(sqlite_engine_file: "Engine"):
    """SQLite connections get foreign keys, WAL and relaxed sync."""
    with sqlite_engine_file.connect() as cxn:
        fk = cxn.exec_driver_sql("PRAGMA foreign_keys;").scalar()
        jm = cxn.exec_driver_sql("PRAGMA journal_mode;").scalar()
        sync = cxn.exec_driver_sql("PRAGMA synchronous;").scalar()
    assert fk == 1
    assert jm is not None
    assert jm.lower() == "wal"
    assert sync == 1


def test_echo_flag_passed_through():
    """echo=True turns on SQL statement logging."""
    engine = make_engine("sqlite:///:memory:", echo=True)
    try:
        assert engine.echo is True
    finally:
        engine.dispose()
