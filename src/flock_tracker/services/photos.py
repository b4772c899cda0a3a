"""Photo storage interface."""

from typing import Protocol


class ImageStorage(Protocol):
    """Stores image bytes outside the persisted collections."""

    def save(self, data: bytes) -> str:
        """Store image bytes and return the file reference."""

    def load(self, name: str) -> bytes | None:
        """Return image bytes for a reference, if the file exists."""
