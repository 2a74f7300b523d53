"""ID generators for the circulation service."""

import threading

from ulid import monotonic

from circulation.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class TimeOrderedUUIDGenerator(IdGenerator):
    """Thread-safe generator of time-ordered UUID strings.

    Draws a monotonic ULID and renders its 128 bits in the canonical
    hyphenated UUID form, so IDs sort by creation time and still parse as
    UUIDs at the HTTP boundary. This is the default generator for item and
    hold IDs.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new time-ordered UUID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new().uuid)


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential IDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length

    def new_id(self) -> str:
        """Generate a new unique identifier."""
        self._counter += 1
        return f"{self._counter:0{self._length}d}"
