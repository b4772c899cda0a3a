"""Image storage in a local directory."""

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from flock_tracker.services.photos import ImageStorage


@dataclass
class LocalImageStorage(ImageStorage):
    """Writes each image to ``<directory>/<uuid>.jpg``."""

    directory: Path
    suffix: str = ".jpg"

    def save(self, data: bytes) -> str:
        """Write the bytes to a new file and return its name."""
        self.directory.mkdir(parents=True, exist_ok=True)
        name = f"{uuid4()}{self.suffix}"
        (self.directory / name).write_bytes(data)
        return name

    def load(self, name: str) -> bytes | None:
        """Return file bytes, or None when the file is missing."""
        path = self.directory / Path(name).name
        if not path.is_file():
            return None
        return path.read_bytes()
