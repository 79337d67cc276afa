# valetudo_map/core/state.py
"""
SharedState: latest decoded map held by the HTTP surface.
"""
from dataclasses import dataclass, field
from threading import Lock
from typing import Optional, Tuple

from ..models.map import MapDocument


@dataclass
class SharedState:
    """
    Holds the most recently decoded MapDocument. Documents are immutable, so
    readers take the reference under the lock and work on it outside.
    """
    document: Optional[MapDocument] = None
    version: int = 0
    decode_failures: int = 0
    last_error: Optional[str] = None
    lock: Lock = field(default_factory=Lock)

    def publish(self, doc: MapDocument) -> int:
        with self.lock:
            self.document = doc
            self.version += 1
            self.last_error = None
            return self.version

    def record_failure(self, message: str) -> None:
        with self.lock:
            self.decode_failures += 1
            self.last_error = message

    def current(self) -> Optional[MapDocument]:
        with self.lock:
            return self.document

    def snapshot(self) -> Tuple[Optional[MapDocument], int]:
        """Document and the version it was published as, read together."""
        with self.lock:
            return self.document, self.version

    def reset(self) -> None:
        with self.lock:
            self.document = None
            self.version = 0
            self.decode_failures = 0
            self.last_error = None
