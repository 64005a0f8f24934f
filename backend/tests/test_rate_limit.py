import asyncio
import time

import pytest

from org_api.infrastructure.rate_limit import LimitsRateLimiter


def _admit_many(rate_limits, identities):
    async def scenario():
        limiter = LimitsRateLimiter("async+memory://", rate_limits)
        return [await limiter.admit(identity) for identity in identities]

    return asyncio.run(scenario())


def test_admits_until_quota_is_spent():
    admissions = _admit_many(["2 per minute"], ["1.2.3.4"] * 3)
    assert [a.allowed for a in admissions] == [True, True, False]


def test_quota_is_per_identity():
    admissions = _admit_many(["1 per minute"], ["1.1.1.1", "2.2.2.2", "1.1.1.1"])
    assert [a.allowed for a in admissions] == [True, True, False]


def test_reset_timestamp_is_in_milliseconds():
    before = time.time()
    [admission] = _admit_many(["5 per minute"], ["1.2.3.4"])
    assert before * 1000 < admission.reset_at <= (before + 61) * 1000


def test_every_configured_window_is_enforced():
    admissions = _admit_many(["100 per day", "1 per minute"], ["1.2.3.4"] * 2)
    assert [a.allowed for a in admissions] == [True, False]


def test_requires_a_limit():
    with pytest.raises(ValueError):
        LimitsRateLimiter("async+memory://", ["", " "])
