"""Shared fixtures for the salon booking tests"""

import os
import uuid
from datetime import datetime, timezone

# Configure before the package reads its settings
os.environ["RECORD_STORE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEFAULTS"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "123"
os.environ["SECURITY_HEADERS_ENABLED"] = "true"
os.environ.pop("REDIS_URL", None)
os.environ.pop("GEMINI_API_KEY", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from salon_booking.domain.scheduling.service import SchedulingService  # noqa: E402
from salon_booking.locks import SchedulingLock  # noqa: E402
from salon_booking.main import app  # noqa: E402
from salon_booking.seed import seed_catalog  # noqa: E402
from salon_booking.store import InMemoryRecordStore, get_store  # noqa: E402

FIXED_NOW = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)


def at(hour: int, minute: int = 0, day: int = 20) -> datetime:
    """A UTC timestamp on a fixed October 2026 day"""
    return datetime(2026, 10, day, hour, minute, tzinfo=timezone.utc)


class FakeRedisLock:
    """Stands in for redis.lock.Lock with a scripted acquire/release"""

    def __init__(self, acquired=True, release_error=None):
        self.acquired = acquired
        self.release_error = release_error
        self.acquire_calls = 0
        self.release_calls = 0

    def acquire(self):
        self.acquire_calls += 1
        return self.acquired

    def release(self):
        self.release_calls += 1
        if self.release_error is not None:
            raise self.release_error


class FakeRedis:
    """Records lock() calls the way redis.Redis.lock is used by SchedulingLock"""

    def __init__(self, lock=None):
        self.redis_lock = lock or FakeRedisLock()
        self.lock_calls = []

    def lock(self, name, timeout=None, blocking_timeout=None):
        self.lock_calls.append({"name": name, "timeout": timeout, "blocking_timeout": blocking_timeout})
        return self.redis_lock


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def catalog(store):
    """Default catalog: 1=50/30, 2=40/30, 3=80/50, 4=20/15"""
    seed_catalog(store)
    return store


@pytest.fixture
def lock():
    # Unique name so tests never share a process-local lock
    return SchedulingLock(name=f"test:{uuid.uuid4().hex}", wait=1)


@pytest.fixture
def scheduling(catalog, lock):
    return SchedulingService(catalog, lock=lock, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(catalog, client):
    return client
