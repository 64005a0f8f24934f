"""
Database Port - Read-only access to the relational store.
Implementation: org_api/infrastructure/persistence/prisma_database.py
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy import Select


class Database(ABC):
    @abstractmethod
    async def fetch_all(self, statement: "Select") -> list[dict[str, Any]]:
        """Run a SELECT statement and return its rows as dicts keyed by column label."""
        ...
