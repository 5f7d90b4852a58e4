# barbershop/db.py

"""
Database access layer.

Route handlers talk to a ``Database`` through four calls: ``execute`` for
writes, ``fetch_one`` / ``fetch_many`` for reads and ``raw_execute`` for
schema scripts. SQL uses positional ``?`` placeholders and every row comes
back as a plain dict with lower-cased column names, whichever engine is
behind it.

Two engines are available:

* ``SQLiteDatabase`` - embedded file database (default).
* ``RemoteDatabase`` - remote libSQL/Turso database, used when
  ``TURSO_DATABASE_URL`` is configured.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, NamedTuple, Optional, Sequence

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Dialect, Engine
from sqlalchemy.schema import CreateIndex, CreateTable
from sqlmodel import SQLModel

from barbershop import models  # noqa: F401  registers tables on SQLModel.metadata
from barbershop.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ExecuteResult(NamedTuple):
    lastrowid: Optional[int]
    rowcount: int


def normalize_row(row) -> dict[str, Any]:
    """Turn a result row into a dict keyed by lower-cased column name."""
    return {key.lower(): value for key, value in row._mapping.items()}


class Database(ABC):
    """Uniform query interface over a SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecuteResult:
        with self.engine.begin() as conn:
            result = conn.exec_driver_sql(sql, tuple(params))
            return ExecuteResult(result.lastrowid, result.rowcount)

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict[str, Any]]:
        with self.engine.begin() as conn:
            row = conn.exec_driver_sql(sql, tuple(params)).first()
        return normalize_row(row) if row is not None else None

    def fetch_many(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        with self.engine.begin() as conn:
            rows = conn.exec_driver_sql(sql, tuple(params)).all()
        return [normalize_row(row) for row in rows]

    @abstractmethod
    def raw_execute(self, script: str) -> None:
        """Run a parameterless script of one or more ``;``-separated statements."""

    def update_columns(
        self,
        table: str,
        row_id: int,
        changes: dict[str, Any],
    ) -> ExecuteResult:
        """
        UPDATE ``table`` SET the given columns WHERE id = ``row_id``.

        Column names must come from a request schema's declared fields or
        other trusted code, never from raw request keys.
        """
        assignments = ", ".join(f"{column} = ?" for column in changes)
        params = [*changes.values(), row_id]
        return self.execute(f"UPDATE {table} SET {assignments} WHERE id = ?", params)

    def create_schema(self) -> None:
        statements = schema_statements(self.engine.dialect)
        self.raw_execute(";\n".join(statements) + ";")

    def close(self) -> None:
        self.engine.dispose()


class SQLiteDatabase(Database):
    """Embedded file-based engine."""

    def __init__(self, path: str, echo: bool = False):
        engine = create_engine(
            f"sqlite:///{path}",
            echo=echo,
            connect_args={"check_same_thread": False},  # required for SQLite + FastAPI
        )

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

        super().__init__(engine)
        self.path = path

    def raw_execute(self, script: str) -> None:
        raw = self.engine.raw_connection()
        try:
            cursor = raw.cursor()
            cursor.executescript(script)
            cursor.close()
            raw.commit()
        finally:
            raw.close()


class RemoteDatabase(Database):
    """
    Remote libSQL/Turso engine.

    Needs the ``sqlalchemy-libsql`` dialect (``pip install .[remote]``).
    ``url`` may be given as ``libsql://host`` or ``https://host``; it is
    rewritten to the ``sqlite+libsql://host?secure=true`` form the dialect
    expects.
    """

    def __init__(self, url: str, auth_token: Optional[str] = None, echo: bool = False):
        connect_args = {"auth_token": auth_token} if auth_token else {}
        engine = create_engine(
            self.engine_url(url),
            echo=echo,
            connect_args=connect_args,
        )
        super().__init__(engine)

    @staticmethod
    def engine_url(url: str) -> str:
        if url.startswith("sqlite+libsql://"):
            return url
        host = url.split("://", 1)[-1].rstrip("/")
        return f"sqlite+libsql://{host}?secure=true"

    def raw_execute(self, script: str) -> None:
        statements = [s.strip() for s in script.split(";") if s.strip()]
        with self.engine.begin() as conn:
            for statement in statements:
                conn.exec_driver_sql(statement)


def schema_statements(dialect: Dialect) -> list[str]:
    """CREATE TABLE / CREATE INDEX IF NOT EXISTS for every model, in FK order."""
    statements = []
    for table in SQLModel.metadata.sorted_tables:
        statements.append(str(CreateTable(table, if_not_exists=True).compile(dialect=dialect)).strip())
        for index in sorted(table.indexes, key=lambda i: i.name):
            statements.append(str(CreateIndex(index, if_not_exists=True).compile(dialect=dialect)).strip())
    return statements


def create_database(settings: Settings) -> Database:
    if settings.TURSO_DATABASE_URL:
        logger.info("Using remote libSQL database")
        return RemoteDatabase(settings.TURSO_DATABASE_URL, settings.TURSO_AUTH_TOKEN)
    logger.info(f"Using SQLite database at {settings.DATABASE_PATH}")
    return SQLiteDatabase(settings.DATABASE_PATH)


def init_db(db: Database, seed: bool = True) -> None:
    """Create missing tables and, optionally, insert the default data."""
    from barbershop.seed import seed_defaults

    db.create_schema()
    if seed:
        seed_defaults(db)
    logger.info("Database initialized successfully")


@lru_cache
def get_database() -> Database:
    return create_database(get_settings())


# Dependency: the process-wide database
def get_db() -> Database:
    return get_database()
