"""
Prisma Database - Implements the Database port with Prisma raw queries.

Statements are built with SQLAlchemy Core and compiled for PostgreSQL with
numbered placeholders ($1, $2, ...), the form `query_raw` expects. One client
is created and connected at startup, shared by every request and
disconnected when the DI container closes.
"""

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote as url_quote, urlsplit, urlunsplit

from sqlalchemy import Select
from sqlalchemy.dialects.postgresql import asyncpg

from org_api.domain.ports import Database

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

# Only used to compile; the asyncpg driver itself is never loaded
POSTGRES_DIALECT = asyncpg.dialect()


def compile_statement(statement: Select) -> tuple[str, list[Any]]:
    """SQL text with $n placeholders plus the positional parameter values."""
    compiled = statement.compile(
        dialect=POSTGRES_DIALECT,
        compile_kwargs={"render_postcompile": True},
    )
    params = [compiled.params[name] for name in compiled.positiontup]
    return compiled.string, params


def datasource_url(url: str, auth_token: str = "") -> str:
    """
    Fold an auth token into the connection URL as its password.

    URLs that already carry a password, or calls without a token, are
    returned unchanged.
    """
    if not url or not auth_token:
        return url
    parts = urlsplit(url)
    if parts.password:
        return url
    host = parts.netloc.rsplit("@", 1)[-1]
    user = parts.username or ""
    netloc = f"{user}:{url_quote(auth_token, safe='')}@{host}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


class PrismaDatabase(Database):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    async def fetch_all(self, statement: Select) -> list[dict[str, Any]]:
        sql, params = compile_statement(statement)
        return await self._prisma.query_raw(sql, *params)

    async def disconnect(self) -> None:
        if self._prisma.is_connected():
            await self._prisma.disconnect()


async def connect_prisma(url: str = "", auth_token: str = "") -> PrismaDatabase:
    """Create and connect the process-wide Prisma client."""
    # The client module only exists after `prisma generate` has run
    from prisma import Prisma

    url = datasource_url(url, auth_token)
    prisma = Prisma(datasource={"url": url}) if url else Prisma()
    await prisma.connect()
    logger.info("Connected to database")
    return PrismaDatabase(prisma)
