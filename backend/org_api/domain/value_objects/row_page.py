"""
RowPage - Flat join rows for one page of parents plus the filtered total.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RowPage:
    rows: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
