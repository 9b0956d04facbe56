"""Error types raised by selffit."""


class SelfFitError(Exception):
    """Base class for selffit errors."""


class NotFoundError(SelfFitError):
    """An operation referenced an id that does not exist."""

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} with id {item_id} not found")


class PersistenceError(SelfFitError):
    """Reading from or writing to durable storage failed."""


class NotificationError(SelfFitError):
    """Scheduling or cancelling a notification failed."""
