"""
DepartmentType Value Object - BE (Badan Eksekutif) or DP (Dewan Perwakilan).

Query strings use the lower-case form, the store keeps the upper-case one.
"""

from enum import Enum


class DepartmentType(str, Enum):
    BE = "be"
    DP = "dp"

    @property
    def stored_value(self) -> str:
        return self.value.upper()

    @classmethod
    def allowed(cls) -> list[str]:
        return [member.value for member in cls]
