class StatBufferError(Exception):
    """Base class for StatBuffer usage errors."""


class InvalidArgumentError(StatBufferError, ValueError):
    """Raised for an absent sequence, a bad capacity or a non-integer value."""


class CapacityExceededError(StatBufferError):
    """Raised when an append does not fit in the remaining capacity.

    The buffer is left untouched when this is raised.
    """

    def __init__(self, capacity: int, count: int, requested: int):
        self.capacity = capacity
        self.count = count
        self.requested = requested
        super().__init__(
            f"Cannot add {requested} value(s): {count}/{capacity} slots used"
        )
