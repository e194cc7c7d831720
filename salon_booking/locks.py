"""
Scheduling lock - exclusive scope around the read-check-write of a booking.

Uses a Redis lock when REDIS_URL is configured so several API workers share it,
and a process-local lock otherwise (or when Redis is unreachable).
"""

import logging
import time
from contextlib import contextmanager
from threading import Lock
from typing import Iterator, Optional

import redis
from redis.exceptions import LockError

from .config import (
    REDIS_URL,
    SCHEDULING_LOCK_NAME,
    SCHEDULING_LOCK_REDIS_RETRY_SECONDS,
    SCHEDULING_LOCK_TIMEOUT_SECONDS,
    SCHEDULING_LOCK_WAIT_SECONDS,
)
from .errors import SchedulingBusyError

logger = logging.getLogger(__name__)

# Redis connection
redis_client: Optional[redis.Redis] = None

# Process-local locks, one per lock name
_local_locks: dict[str, Lock] = {}
_local_locks_guard = Lock()

# Process-wide lock used by the API, rebuilt while it runs on the local fallback
_configured_lock: Optional["SchedulingLock"] = None
_configured_at = 0.0
_configured_guard = Lock()


def get_redis_client() -> Optional[redis.Redis]:
    """
    Get or create the Redis client.
    Returns None when REDIS_URL is not configured.
    """
    global redis_client

    if not REDIS_URL:
        return None

    if redis_client is None:
        # Mask password in URL for logging
        if "@" in REDIS_URL:
            url_parts = REDIS_URL.split("@")
            protocol = url_parts[0].split(":")[0]
            masked_url = f"{protocol}:****@{url_parts[1]}"
        else:
            masked_url = "****"
        logger.info(f"📡 Connecting to Redis for scheduling locks: {masked_url}")

        try:
            client = redis.from_url(
                REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=10,
                retry_on_timeout=True,
                health_check_interval=30,
            )
            client.ping()
            redis_client = client
            logger.info("Redis connected successfully via URL")
        except Exception as e:
            logger.error(f"❌ Failed to connect to Redis via URL: {str(e)}")
            raise

    return redis_client


def _local_lock(name: str) -> Lock:
    with _local_locks_guard:
        return _local_locks.setdefault(name, Lock())


class SchedulingLock:
    """Exclusive lock scoped to one scheduling resource"""

    def __init__(
        self,
        name: str = SCHEDULING_LOCK_NAME,
        timeout: float = SCHEDULING_LOCK_TIMEOUT_SECONDS,
        wait: float = SCHEDULING_LOCK_WAIT_SECONDS,
        client: Optional[redis.Redis] = None,
    ):
        self.name = name
        self.timeout = timeout
        self.wait = wait
        self.client = client

    @classmethod
    def from_config(cls) -> "SchedulingLock":
        """Build the lock for the configured backend, falling back to a local lock"""
        try:
            client = get_redis_client()
        except Exception as e:
            logger.warning(f"⚠️ Redis unavailable - scheduling lock is process-local only: {e}")
            client = None
        return cls(client=client)

    @contextmanager
    def hold(self) -> Iterator[None]:
        """
        Hold the lock for the duration of the block.

        Raises:
            SchedulingBusyError: If the lock is not acquired within `wait` seconds
        """
        if self.client is not None:
            redis_lock = self.client.lock(self.name, timeout=self.timeout, blocking_timeout=self.wait)
            if not redis_lock.acquire():
                logger.warning(f"⚠️ Timed out waiting for scheduling lock {self.name}")
                raise SchedulingBusyError("scheduling is busy, please try again")
            try:
                yield
            finally:
                try:
                    redis_lock.release()
                except LockError as e:
                    # Lease expired before release; the block already ran to completion
                    logger.warning(f"⚠️ Scheduling lock {self.name} expired before release: {e}")
            return

        lock = _local_lock(self.name)
        if not lock.acquire(timeout=self.wait):
            logger.warning(f"⚠️ Timed out waiting for scheduling lock {self.name}")
            raise SchedulingBusyError("scheduling is busy, please try again")
        try:
            yield
        finally:
            lock.release()


def get_scheduling_lock() -> SchedulingLock:
    """
    Dependency injection for the process-wide scheduling lock.

    While Redis is configured but unreachable the lock is process-local; Redis is
    tried again every SCHEDULING_LOCK_REDIS_RETRY_SECONDS so the worker returns to
    cross-worker exclusion once it is back.
    """
    global _configured_lock, _configured_at

    with _configured_guard:
        on_fallback = (
            _configured_lock is not None
            and _configured_lock.client is None
            and bool(REDIS_URL)
            and time.monotonic() - _configured_at >= SCHEDULING_LOCK_REDIS_RETRY_SECONDS
        )
        if _configured_lock is None or on_fallback:
            _configured_lock = SchedulingLock.from_config()
            _configured_at = time.monotonic()
            if on_fallback and _configured_lock.client is not None:
                logger.info("✅ Redis reachable again - scheduling lock shared across workers")

        return _configured_lock
