"""Abstract Publisher and base implementation for observability."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from satcom.observability import get_logger

if TYPE_CHECKING:
    from satcom.errors import SubscriptionError
    from satcom.subscriber import Subscriber


class Publisher(ABC):
    """Abstract base class for publishers that keep subscribers keyed by id."""

    def __init__(self, publisher_id: str) -> None:
        self._publisher_id = publisher_id
        self._logger = get_logger(f"satcom.publisher.{publisher_id}")

    @property
    def publisher_id(self) -> str:
        return self._publisher_id

    @abstractmethod
    def subscribe(self, subscriber: "Subscriber") -> None:
        """
        Add a subscriber under its id.
        Raises AlreadySubscribed if the id is taken; the existing entry is kept.
        """
        pass

    @abstractmethod
    def unsubscribe(self, subscriber_id: int) -> None:
        """Remove the subscriber with this id. Raises NotSubscribed if absent."""
        pass

    @abstractmethod
    def notify(self, message: str) -> int:
        """Broadcast message to every current subscriber. Never raises; returns deliveries made."""
        pass

    @abstractmethod
    def notify_to(self, subscriber_id: int, message: str) -> None:
        """Deliver message to one subscriber. Raises InvalidId if absent."""
        pass

    def on_subscribe(self, subscriber: "Subscriber") -> None:
        """Called after a subscriber is added (for observability)."""
        self._logger.info(
            "subscriber_added",
            extra={"publisher_id": self._publisher_id, "subscriber_id": subscriber.subscriber_id},
        )

    def on_unsubscribe(self, subscriber: "Subscriber") -> None:
        """Called after a subscriber is removed (for observability)."""
        self._logger.info(
            "subscriber_removed",
            extra={"publisher_id": self._publisher_id, "subscriber_id": subscriber.subscriber_id},
        )

    def on_rejected(self, error: "SubscriptionError") -> None:
        """Called before a SubscriptionError is raised; reporting it is up to the caller."""
        self._logger.info(
            "request_rejected",
            extra={
                "publisher_id": self._publisher_id,
                "subscriber_id": error.subscriber_id,
                "code": error.code,
            },
        )

    def on_notify(self, message: str, recipients: int) -> None:
        """Called after a broadcast or unicast (for observability)."""
        self._logger.info(
            "notified",
            extra={
                "publisher_id": self._publisher_id,
                "recipients": recipients,
                "length": len(message),
            },
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._publisher_id!r})"
