"""Per-bucket rate limiting driven by Discord's X-RateLimit-* response headers.

Every REST call takes a lease on the bucket of its route before the request
is sent and hands the response headers back when it is done::

    bucket = await limiter.acquire(route.bucket_key)
    try:
        response = await client.request(...)
    except httpx.TransportError:
        bucket.release(None)
        raise
    bucket.release(response.headers)

Only one request per bucket is in flight at a time. A response flagged as
global blocks every bucket of the limiter until the global reset passes.
"""

from __future__ import annotations

import asyncio
import enum
import logging
import math
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from email.utils import parsedate_to_datetime

import httpx

from discord_sdk.errors import RateLimitHeaderError

log = logging.getLogger(__name__)

# Added to absolute resets to absorb network jitter.
RESET_SAFETY_MARGIN = 0.25

MIN_REMAINING = 1

HEADER_REMAINING = "x-ratelimit-remaining"
HEADER_RESET = "x-ratelimit-reset"
HEADER_RESET_AFTER = "x-ratelimit-reset-after"
HEADER_GLOBAL = "x-ratelimit-global"

Clock = Callable[[], float]


@dataclass(frozen=True)
class CustomRateLimit:
    """Client-enforced limit for bucket keys ending in ``suffix``."""

    suffix: str
    requests: int
    window: float  # seconds


DEFAULT_CUSTOM_LIMITS: tuple[CustomRateLimit, ...] = (
    CustomRateLimit(suffix="/reactions/{emoji}/@me", requests=1, window=0.2),
)


class GlobalThrottle:
    """Time before which no bucket of a limiter may send anything."""

    def __init__(self) -> None:
        self.resume_at = 0.0

    def block_until(self, resume_at: float) -> None:
        self.resume_at = resume_at

    def delay(self, now: float) -> float:
        return max(0.0, self.resume_at - now)


class ReleaseKind(enum.Enum):
    CUSTOM_RULE = "custom_rule"
    GLOBAL_RESET = "global_reset"
    BUCKET_RESET = "bucket_reset"
    NO_UPDATE = "no_update"


@dataclass(frozen=True)
class ReleasePlan:
    """State changes a release applies; ``None`` fields are left alone."""

    kind: ReleaseKind
    remaining: int | None = None
    reset_at: float | None = None
    last_reset: float | None = None


class Bucket:
    """Rate-limit state of one route group.

    Fields are only written while the bucket's lock is held, i.e. between
    :meth:`RateLimiter.acquire` and :meth:`release`.
    """

    def __init__(
        self,
        key: str,
        *,
        throttle: GlobalThrottle,
        clock: Clock = time.monotonic,
        custom_limit: CustomRateLimit | None = None,
    ) -> None:
        self.key = key
        self.remaining = 1
        self.reset_at = 0.0
        self.last_reset: float | None = None
        self.custom_limit = custom_limit
        self._throttle = throttle
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    def release(self, headers: Mapping[str, str] | None = None) -> ReleasePlan:
        """Update throttling state from a response and unlock the bucket.

        ``headers`` is ``None`` when no response was received; the previous
        state is then kept as is.

        Raises :class:`RateLimitHeaderError` if a rate-limit header cannot be
        parsed. The bucket is unlocked either way.
        """
        try:
            plan = plan_release(self, headers, self._clock())
            self._apply(plan)
            return plan
        finally:
            self._lock.release()

    def _apply(self, plan: ReleasePlan) -> None:
        if plan.kind is ReleaseKind.NO_UPDATE:
            return
        if plan.kind is ReleaseKind.GLOBAL_RESET:
            assert plan.reset_at is not None
            log.warning(
                "Global rate limit hit on %s, blocking all buckets for %.2fs",
                self.key, plan.reset_at - self._clock(),
            )
            self._throttle.block_until(plan.reset_at)
        elif plan.reset_at is not None:
            self.reset_at = plan.reset_at
        if plan.last_reset is not None:
            self.last_reset = plan.last_reset
        if plan.remaining is not None:
            self.remaining = plan.remaining

    def __repr__(self) -> str:
        return (
            f"Bucket(key={self.key!r}, remaining={self.remaining}, "
            f"reset_at={self.reset_at:.3f}, custom={self.custom_limit is not None})"
        )


# ---------------------------------------------------------------------------
# Release decision
# ---------------------------------------------------------------------------

def plan_release(bucket: Bucket, headers: Mapping[str, str] | None, now: float) -> ReleasePlan:
    """Decide how a release updates ``bucket`` without touching it."""
    if bucket.custom_limit is not None:
        return _plan_custom(bucket, bucket.custom_limit, now)
    if headers is None:
        return ReleasePlan(ReleaseKind.NO_UPDATE)

    headers = httpx.Headers(headers)
    remaining = headers.get(HEADER_REMAINING) or None
    reset = headers.get(HEADER_RESET) or None
    reset_after = headers.get(HEADER_RESET_AFTER) or None
    is_global = _is_flag_set(headers.get(HEADER_GLOBAL))

    if remaining is None and reset is None and reset_after is None:
        return ReleasePlan(ReleaseKind.NO_UPDATE)

    resume_at: float | None = None
    if reset_after is not None:
        resume_at = now + _parse_float(HEADER_RESET_AFTER, reset_after)
    elif reset is not None:
        server_now = _parse_date(headers.get("date"))
        delta = _parse_float(HEADER_RESET, reset) - server_now
        resume_at = now + delta + RESET_SAFETY_MARGIN

    parsed_remaining = _parse_int(HEADER_REMAINING, remaining) if remaining is not None else None

    if is_global and resume_at is not None:
        return ReleasePlan(ReleaseKind.GLOBAL_RESET, remaining=parsed_remaining, reset_at=resume_at)
    return ReleasePlan(ReleaseKind.BUCKET_RESET, remaining=parsed_remaining, reset_at=resume_at)


def _plan_custom(bucket: Bucket, rule: CustomRateLimit, now: float) -> ReleasePlan:
    remaining = bucket.remaining
    last_reset = None
    if bucket.last_reset is None or now - bucket.last_reset >= rule.window:
        remaining = rule.requests - 1
        last_reset = now
    reset_at = now + rule.window if remaining < MIN_REMAINING else None
    return ReleasePlan(
        ReleaseKind.CUSTOM_RULE, remaining=remaining, reset_at=reset_at, last_reset=last_reset
    )


def _is_flag_set(value: str | None) -> bool:
    return bool(value) and value.strip().lower() != "false"


def _parse_float(header: str, value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise RateLimitHeaderError(header, value) from None
    if not math.isfinite(parsed):
        raise RateLimitHeaderError(header, value)
    return parsed


def _parse_int(header: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RateLimitHeaderError(header, value) from None


def _parse_date(value: str | None) -> float:
    """Server time of the response as a unix timestamp."""
    if not value:
        raise RateLimitHeaderError("date", value)
    try:
        return parsedate_to_datetime(value).timestamp()
    except (TypeError, ValueError, IndexError):
        raise RateLimitHeaderError("date", value) from None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class RateLimiter:
    """Registry of buckets plus the global throttle they share.

    One instance is owned by each :class:`~discord_sdk.http.HTTPClient`;
    pass the same instance to several clients to make them share limits.
    """

    def __init__(
        self,
        custom_limits: Iterable[CustomRateLimit] | None = None,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self._buckets: dict[str, Bucket] = {}
        self._custom_limits = tuple(
            DEFAULT_CUSTOM_LIMITS if custom_limits is None else custom_limits
        )
        self._clock = clock
        self.global_throttle = GlobalThrottle()

    @property
    def custom_limits(self) -> tuple[CustomRateLimit, ...]:
        return self._custom_limits

    def get_bucket(self, key: str) -> Bucket:
        """Return the bucket for ``key``, creating it on first use."""
        bucket = self._buckets.get(key)
        if bucket is not None:
            return bucket

        custom = next(
            (rule for rule in self._custom_limits if key.endswith(rule.suffix)), None
        )
        bucket = Bucket(key, throttle=self.global_throttle, clock=self._clock, custom_limit=custom)
        self._buckets[key] = bucket
        log.debug("Created rate-limit bucket %s (custom=%s)", key, custom)
        return bucket

    def wait_time(self, bucket: Bucket, min_remaining: int = MIN_REMAINING) -> float:
        """Seconds to wait before ``bucket`` has a request available."""
        if bucket.remaining < min_remaining:
            return max(0.0, bucket.reset_at - self._clock())
        return 0.0

    def block_globally(self, delay: float) -> None:
        """Hold back every bucket for ``delay`` seconds."""
        self.global_throttle.block_until(self._clock() + delay)

    async def acquire(self, key: str, *, timeout: float | None = None) -> Bucket:
        """Wait until a request may be sent for ``key`` and lock its bucket.

        The returned bucket stays locked until :meth:`Bucket.release` is
        called. On cancellation or timeout the lock is given back and
        ``remaining`` is not consumed.
        """
        return await self.acquire_bucket(self.get_bucket(key), timeout=timeout)

    async def acquire_bucket(self, bucket: Bucket, *, timeout: float | None = None) -> Bucket:
        if timeout is None:
            await self._lock_and_wait(bucket)
        else:
            await asyncio.wait_for(self._lock_and_wait(bucket), timeout)
        bucket.remaining -= 1
        return bucket

    async def _lock_and_wait(self, bucket: Bucket) -> None:
        await bucket._lock.acquire()
        try:
            delay = self.wait_time(bucket)
            if delay > 0:
                log.debug("Bucket %s exhausted, sleeping %.3fs", bucket.key, delay)
                await asyncio.sleep(delay)

            while (delay := self.global_throttle.delay(self._clock())) > 0:
                log.debug("Global rate limit active, %s sleeping %.3fs", bucket.key, delay)
                await asyncio.sleep(delay)
        except BaseException:
            bucket._lock.release()
            raise
