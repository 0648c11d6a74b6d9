from __future__ import annotations

import threading
from typing import Any

ID_PREFIX = "a11y-"


class IdentityAllocator:
    """Hands out element ids of the form `a11y-<n>`.

    A caller-supplied id is passed through (as a string) and does not advance the counter.
    """

    def __init__(self, *, prefix: str = ID_PREFIX, start: int = 0):
        self._prefix = prefix
        self._start = start
        self._next_id = start
        self._lock = threading.Lock()

    def allocate(self, supplied_id: Any = None) -> str:
        if supplied_id is not None and supplied_id != "":
            return str(supplied_id)
        with self._lock:
            value = self._next_id
            self._next_id += 1
        return f"{self._prefix}{value}"

    def reset(self) -> None:
        with self._lock:
            self._next_id = self._start

    @property
    def allocated(self) -> int:
        return self._next_id - self._start


allocator = IdentityAllocator()
