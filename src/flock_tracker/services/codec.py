"""JSON codec for persisted collections."""

from dataclasses import dataclass, field

from pydantic import TypeAdapter

from flock_tracker.domain.flock import Chick, Hen
from flock_tracker.domain.incubation import Egg, EnvironmentReading
from flock_tracker.domain.journal import LogEntry, ReminderTask
from flock_tracker.domain.state import Collection


class DecodeError(ValueError):
    """Raised when stored bytes cannot be turned back into a collection."""


def _default_adapters() -> dict[Collection, TypeAdapter]:
    return {
        Collection.EGGS: TypeAdapter(tuple[Egg, ...]),
        Collection.CHICKS: TypeAdapter(tuple[Chick, ...]),
        Collection.HENS: TypeAdapter(tuple[Hen, ...]),
        Collection.ENVIRONMENT: TypeAdapter(EnvironmentReading),
        Collection.LOGS: TypeAdapter(tuple[LogEntry, ...]),
        Collection.TASKS: TypeAdapter(tuple[ReminderTask, ...]),
    }


@dataclass
class CollectionCodec:
    """Encode and decode collections as JSON bytes."""

    adapters: dict[Collection, TypeAdapter] = field(default_factory=_default_adapters)

    def encode(self, collection: Collection, value: object) -> bytes:
        """Serialize a collection value."""
        return self.adapters[collection].dump_json(value)

    def decode(self, collection: Collection, payload: bytes) -> object:
        """Parse a collection value, raising DecodeError on bad payloads."""
        try:
            return self.adapters[collection].validate_json(payload)
        except ValueError as exc:
            raise DecodeError(
                f"Stored {collection.value} payload is invalid: {exc}"
            ) from exc
