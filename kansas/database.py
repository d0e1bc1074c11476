"""SQLite database access using aiosqlite (async driver)."""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

import aiosqlite

from kansas.config import settings
from kansas.schema import ALL_TABLES, INDEXES

logger = logging.getLogger(__name__)

Params = Mapping[str, Any]


class Database:
    """
    SQLite database manager.

    Every query runs on its own connection: acquired for the call, committed
    on success, rolled back on error and closed on every exit path.
    """

    def __init__(self, path: str):
        self.path = path

    async def connect(self) -> None:
        """Create tables and indexes if they are missing."""
        async with self.acquire() as conn:
            for statement in ALL_TABLES + INDEXES:
                await conn.execute(statement)
        logger.info("Connected to SQLite database: %s", self.path)

    async def disconnect(self) -> None:
        """Nothing is held open between calls; only logs the shutdown."""
        logger.info("Disconnected from SQLite database: %s", self.path)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Open a connection scoped to a single unit of work."""
        conn = await aiosqlite.connect(self.path)
        try:
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            await conn.commit()
        except BaseException:
            await conn.rollback()
            raise
        finally:
            await conn.close()

    async def fetch_one(self, query: str, params: Params | None = None) -> dict | None:
        """Fetch one row as a dict, or None when nothing matches."""
        async with self.acquire() as conn:
            cursor = await conn.execute(query, params or {})
            row = await cursor.fetchone()
        return dict(row) if row else None

    async def fetch_all(self, query: str, params: Params | None = None) -> list[dict]:
        """Fetch all matching rows as dicts."""
        async with self.acquire() as conn:
            cursor = await conn.execute(query, params or {})
            rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def execute(self, query: str, params: Params | None = None) -> int:
        """Execute a write statement and return the number of rows affected."""
        async with self.acquire() as conn:
            cursor = await conn.execute(query, params or {})
            return cursor.rowcount

    async def insert(self, query: str, params: Params | None = None) -> int:
        """Execute an INSERT and return the generated primary key."""
        async with self.acquire() as conn:
            cursor = await conn.execute(query, params or {})
            return cursor.lastrowid


# Global database instance
database = Database(settings.database_path)


async def get_database() -> Database:
    """Dependency to get database instance."""
    return database
