"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path
from uuid import uuid4

import pytest

from flock_tracker.config import Settings
from flock_tracker.services.clock import Clock
from flock_tracker.services.flock import FlockService
from flock_tracker.services.incubator import IncubatorService
from flock_tracker.services.journal import JournalService
from flock_tracker.services.photos import ImageStorage
from flock_tracker.services.stats import StatsService
from flock_tracker.services.store import (
    FlockStore,
    KeyValueStore,
    StorageReadError,
    StorageWriteError,
)

NOW = datetime(2024, 3, 10, 9, 30, 15, 123456, tzinfo=UTC)


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store with switches for simulated failures."""

    values: dict[str, bytes] = field(default_factory=dict)
    fail_writes: bool = False
    unreadable: set[str] = field(default_factory=set)
    writes: list[str] = field(default_factory=list)

    def get(self, key: str) -> bytes | None:
        if key in self.unreadable:
            raise StorageReadError(f"cannot read {key}")
        return self.values.get(key)

    def put(self, key: str, value: bytes) -> None:
        if self.fail_writes:
            raise StorageWriteError(f"cannot write {key}")
        self.values[key] = value
        self.writes.append(key)


@dataclass
class FixedClock(Clock):
    """Clock that only moves when told to."""

    current: datetime = NOW

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


@dataclass
class InMemoryImageStorage(ImageStorage):
    """Image storage kept in a dict."""

    files: dict[str, bytes] = field(default_factory=dict)

    def save(self, data: bytes) -> str:
        name = f"{uuid4()}.jpg"
        self.files[name] = data
        return name

    def load(self, name: str) -> bytes | None:
        return self.files.get(name)


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("flock_tracker")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def backend() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def store(backend: InMemoryKeyValueStore) -> FlockStore:
    flock_store = FlockStore(backend)
    flock_store.initialize()
    return flock_store


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def images() -> InMemoryImageStorage:
    return InMemoryImageStorage()


@pytest.fixture
def journal_service(store: FlockStore, clock: FixedClock) -> JournalService:
    return JournalService(store=store, clock=clock)


@pytest.fixture
def incubator_service(
    store: FlockStore, journal_service: JournalService
) -> IncubatorService:
    return IncubatorService(store=store, journal=journal_service)


@pytest.fixture
def flock_service(
    store: FlockStore,
    journal_service: JournalService,
    clock: FixedClock,
    images: InMemoryImageStorage,
) -> FlockService:
    return FlockService(
        store=store, journal=journal_service, clock=clock, images=images
    )


@pytest.fixture
def stats_service(store: FlockStore, clock: FixedClock) -> StatsService:
    return StatsService(store=store, clock=clock)
