import logging
from typing import Optional

from .results import DetectionResult

_LOGGER = logging.getLogger(__name__)

DEFAULT_CACHE_CAPACITY = 1000


class DetectionCache:
    """Bounded word -> DetectionResult store with insertion-order (FIFO) eviction.

    Reads do not refresh an entry's position. Keys are used as given; the
    caller is responsible for normalizing them. Not thread-safe.
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self.capacity = int(capacity)
        self._entries: dict[str, DetectionResult] = {}

    def get(self, key: str) -> Optional[DetectionResult]:
        return self._entries.get(key)

    def put(self, key: str, result: DetectionResult) -> None:
        if key in self._entries:
            # Replace in place, keeping the original insertion slot
            self._entries[key] = result
            return

        if len(self._entries) >= self.capacity:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            _LOGGER.debug("Evicted cache entry %r", oldest)

        self._entries[key] = result

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        """Cached keys, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
