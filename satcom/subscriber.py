"""Abstract Subscriber capability and base implementation for observability."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from satcom.observability import get_logger

if TYPE_CHECKING:
    from satcom.publisher import Publisher


def is_subscriber_id(value: object) -> bool:
    """True for non-negative ints; bools and floats such as 1.0 are not ids."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_subscriber_id(subscriber_id: int) -> int:
    """Return subscriber_id if it is a non-negative int; raise TypeError/ValueError otherwise."""
    if isinstance(subscriber_id, bool) or not isinstance(subscriber_id, int):
        raise TypeError(f"subscriber id must be an int, got {type(subscriber_id).__name__}")
    if subscriber_id < 0:
        raise ValueError(f"subscriber id must be non-negative, got {subscriber_id}")
    return subscriber_id


class Subscriber(ABC):
    """Abstract base class for anything that can receive a text notification."""

    def __init__(self, subscriber_id: int) -> None:
        self._subscriber_id = validate_subscriber_id(subscriber_id)
        self._logger = get_logger(f"satcom.subscriber.{subscriber_id}")

    @property
    def subscriber_id(self) -> int:
        return self._subscriber_id

    @abstractmethod
    def receive(self, message: str) -> None:
        """Handle a notification. Must be implemented by subclasses."""
        pass

    def deliver(self, message: str) -> None:
        """Called by a publisher; default implementation calls receive."""
        self.receive(message)

    def on_subscribe(self, publisher: "Publisher") -> None:
        """Called when this subscriber is added to a publisher (for observability)."""
        self._logger.info(
            "subscribed",
            extra={"publisher_id": publisher.publisher_id, "subscriber_id": self._subscriber_id},
        )

    def on_unsubscribe(self, publisher: "Publisher") -> None:
        """Called when this subscriber is removed from a publisher (for observability)."""
        self._logger.info(
            "unsubscribed",
            extra={"publisher_id": publisher.publisher_id, "subscriber_id": self._subscriber_id},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._subscriber_id!r})"
