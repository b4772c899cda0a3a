"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from flock_tracker.adapters.local_image_storage import LocalImageStorage
from flock_tracker.adapters.sqlite_key_value_store import SqliteKeyValueStore
from flock_tracker.config import Settings
from flock_tracker.services.clock import SystemClock
from flock_tracker.services.flock import FlockService
from flock_tracker.services.incubator import IncubatorService
from flock_tracker.services.journal import JournalService
from flock_tracker.services.stats import StatsService
from flock_tracker.services.store import FlockStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: FlockStore
    incubator_service: IncubatorService
    flock_service: FlockService
    journal_service: JournalService
    stats_service: StatsService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container and load persisted state."""
    resolved_settings = settings or Settings()
    resolved_settings.database_path.parent.mkdir(parents=True, exist_ok=True)
    key_value_store = SqliteKeyValueStore.create(resolved_settings.database_path)
    store = FlockStore(key_value_store)
    store.initialize()
    clock = SystemClock()
    images = LocalImageStorage(resolved_settings.photos_dir)
    journal_service = JournalService(store=store, clock=clock)
    incubator_service = IncubatorService(store=store, journal=journal_service)
    flock_service = FlockService(
        store=store, journal=journal_service, clock=clock, images=images
    )
    stats_service = StatsService(store=store, clock=clock)

    def close_resources() -> None:
        key_value_store.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        incubator_service=incubator_service,
        flock_service=flock_service,
        journal_service=journal_service,
        stats_service=stats_service,
        close_resources=close_resources,
    )
