"""Base class for all aggregates."""

import abc
from typing import ClassVar


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    Aggregates are state-stored: repositories persist their current attributes
    and track a version number used for optimistic concurrency control.
    """

    KIND: ClassVar[str]
    """A string identifier for the kind of aggregate (used in errors and logs).

    Concrete aggregate implementations must set this.
    """

    def __init__(self, aggregate_id: str, version: int = 0) -> None:
        self.aggregate_id: str = aggregate_id
        self._version: int = version

    # --- Plumbing ---

    def mark_persisted(self, version: int) -> None:
        """Record the version a repository stored this aggregate at.

        Args:
            version: The stored version (starts at 1 on first save).

        Raises:
            ValueError: If the version would move backwards.
        """
        if version < self._version:
            raise ValueError(
                f"{self.KIND} {self.aggregate_id}: version cannot move from "
                f"{self._version} to {version}"
            )
        self._version = version

    @property
    def version(self) -> int:
        """The persisted version of the aggregate (0 if never saved)."""
        return self._version

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.aggregate_id} v{self._version}>"
