"""
Rate Limiter Port - Admission control keyed by client identity.
Implementation: org_api/infrastructure/rate_limit/limits_rate_limiter.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Admission:
    allowed: bool
    reset_at: int  # unix timestamp, milliseconds


class RateLimiter(ABC):
    @abstractmethod
    async def admit(self, identity: str) -> Admission:
        """
        Consume one unit of quota for identity and report whether the request may proceed.

        Raises whatever the backing store raises when it is unreachable;
        callers must not treat that as an admission.
        """
        ...
