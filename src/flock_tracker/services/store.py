"""State container that owns every collection and persists each mutation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol

from flock_tracker.domain.state import Collection, FlockState
from flock_tracker.services.codec import CollectionCodec, DecodeError

_logger = logging.getLogger(__name__)

STORAGE_KEYS: dict[Collection, str] = {
    Collection.EGGS: "eggsKey",
    Collection.CHICKS: "chicksKey",
    Collection.HENS: "hensKey",
    Collection.ENVIRONMENT: "envKey",
    Collection.LOGS: "logsKey",
    Collection.TASKS: "tasksKey",
}


class StorageReadError(RuntimeError):
    """Raised by a key-value backend when a value cannot be read."""


class StorageWriteError(RuntimeError):
    """Raised by a key-value backend when a value cannot be written."""


class KeyValueStore(Protocol):
    """Local persistent key-value area."""

    def get(self, key: str) -> bytes | None:
        """Return the stored bytes for a key, if present."""

    def put(self, key: str, value: bytes) -> None:
        """Store bytes under a key, replacing any previous value."""


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a single mutation."""

    collection: Collection
    state: FlockState
    persisted: bool


Observer = Callable[[MutationResult], None]


@dataclass
class FlockStore:
    """Single source of truth for the in-memory collections."""

    backend: KeyValueStore
    codec: CollectionCodec = field(default_factory=CollectionCodec)
    _state: FlockState | None = field(default=None, init=False, repr=False)
    _observers: list[Observer] = field(default_factory=list, init=False, repr=False)
    _unsaved: set[Collection] = field(default_factory=set, init=False, repr=False)

    @property
    def state(self) -> FlockState:
        """Return the current snapshot."""
        if self._state is None:
            raise RuntimeError("FlockStore.initialize() has not been called")
        return self._state

    @property
    def unsaved(self) -> frozenset[Collection]:
        """Collections whose latest value failed to persist."""
        return frozenset(self._unsaved)

    def initialize(self) -> FlockState:
        """Load every collection, falling back to defaults per key."""
        if self._state is not None:
            raise RuntimeError("FlockStore is already initialized")
        defaults = FlockState()
        loaded = {
            collection.value: self._load(collection, defaults.get(collection))
            for collection in Collection
        }
        self._state = FlockState(**loaded)
        return self._state

    def mutate(
        self, collection: Collection, update: Callable[[object], object]
    ) -> MutationResult:
        """Apply an update to one collection and write it through."""
        current = self.state
        value = update(current.get(collection))
        payload = self.codec.encode(collection, value)
        self._state = replace(current, **{collection.value: value})
        persisted = self._persist(collection, payload)
        result = MutationResult(
            collection=collection, state=self._state, persisted=persisted
        )
        for observer in list(self._observers):
            observer(result)
        return result

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer and return a callable that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _load(self, collection: Collection, default: object) -> object:
        key = STORAGE_KEYS[collection]
        try:
            payload = self.backend.get(key)
        except StorageReadError:
            _logger.warning("Could not read %s, using default", key, exc_info=True)
            return default
        if payload is None:
            return default
        try:
            return self.codec.decode(collection, payload)
        except DecodeError as exc:
            _logger.warning("Discarding stored %s: %s", key, exc)
            return default

    def _persist(self, collection: Collection, payload: bytes) -> bool:
        key = STORAGE_KEYS[collection]
        try:
            self.backend.put(key, payload)
        except StorageWriteError:
            _logger.exception("Failed to persist %s", key)
            self._unsaved.add(collection)
            return False
        self._unsaved.discard(collection)
        return True
