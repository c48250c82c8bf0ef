"""
Sequential id generator shared by every shape variant.

Ids are handed out in creation order starting at 0. The module-level
default counter lives for the whole process and is never reset; tests and
embedding code inject their own ``IdCounter`` instead.
"""

import threading


class IdCounter:
    """Monotonically increasing id source with an atomic read-and-increment."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the current value and advance the counter by one."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call to ``next_id`` would hand out."""
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"IdCounter(next={self.peek()})"


_default_counter = IdCounter()


def get_default_counter() -> IdCounter:
    """Return the process-wide counter used when none is injected."""
    return _default_counter
