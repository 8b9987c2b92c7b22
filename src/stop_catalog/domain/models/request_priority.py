"""Request priority hint for upstream queries."""

from enum import Enum


class RequestPriority(Enum):
    """Scheduling hint passed to the upstream client.

    Lower ``rank`` is served first.
    """

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    RequestPriority.HIGH: 0,
    RequestPriority.NORMAL: 1,
    RequestPriority.LOW: 2,
}
