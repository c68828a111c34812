"""Concrete Publisher: a ground station holding satellites keyed by id (in-memory)."""

import threading
from typing import Dict, List, Optional

from satcom.errors import AlreadySubscribed, InvalidId, NotSubscribed
from satcom.observability import Metrics
from satcom.publisher import Publisher
from satcom.subscriber import Subscriber, is_subscriber_id

DEFAULT_STATION_ID = "ground-station"


class GroundStation(Publisher):
    """
    Keeps one subscriber per id and broadcasts or unicasts text messages to them.

    notify() works on a copy of the subscriber map taken under the lock, so
    subscribes/unsubscribes made from inside a receive() callback only show
    up on the next broadcast. Counters and metrics are also updated under the
    lock; receive() callbacks run without it.

    Lookups only match real subscriber ids: True or 1.0 never reach subscriber 1.
    """

    def __init__(self, publisher_id: str = DEFAULT_STATION_ID, metrics: Metrics | None = None) -> None:
        super().__init__(publisher_id)
        self._subscribers: Dict[int, Subscriber] = {}
        self._lock = threading.Lock()
        self._metrics = metrics if metrics is not None else Metrics()
        self._messages_delivered: int = 0

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def messages_delivered(self) -> int:
        with self._lock:
            return self._messages_delivered

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    @property
    def subscriber_ids(self) -> List[int]:
        """Sorted copy of the subscribed ids."""
        with self._lock:
            return sorted(self._subscribers)

    def get_subscribers(self) -> List[Subscriber]:
        """Return a copy of the subscriber list (under lock)."""
        with self._lock:
            return list(self._subscribers.values())

    def _lookup(self, subscriber_id: object) -> Optional[Subscriber]:
        # caller holds the lock
        if not is_subscriber_id(subscriber_id):
            return None
        return self._subscribers.get(subscriber_id)

    def get_subscriber(self, subscriber_id: int) -> Optional[Subscriber]:
        with self._lock:
            return self._lookup(subscriber_id)

    def is_subscribed(self, subscriber_id: int) -> bool:
        with self._lock:
            return self._lookup(subscriber_id) is not None

    def subscribe(self, subscriber: Subscriber) -> None:
        subscriber_id = subscriber.subscriber_id
        with self._lock:
            taken = subscriber_id in self._subscribers
            if taken:
                self._metrics.increment("subscribe.rejected")
            else:
                self._subscribers[subscriber_id] = subscriber
                self._metrics.increment("subscribe.accepted")
                self._metrics.set_gauge("subscribers", len(self._subscribers))
        if taken:
            error = AlreadySubscribed(subscriber_id)
            self.on_rejected(error)
            raise error
        self.on_subscribe(subscriber)
        subscriber.on_subscribe(self)

    def unsubscribe(self, subscriber_id: int) -> None:
        with self._lock:
            subscriber = self._lookup(subscriber_id)
            if subscriber is None:
                self._metrics.increment("unsubscribe.rejected")
            else:
                del self._subscribers[subscriber_id]
                self._metrics.increment("unsubscribe.accepted")
                self._metrics.set_gauge("subscribers", len(self._subscribers))
        if subscriber is None:
            error = NotSubscribed(subscriber_id)
            self.on_rejected(error)
            raise error
        self.on_unsubscribe(subscriber)
        subscriber.on_unsubscribe(self)

    def notify(self, message: str) -> int:
        with self._lock:
            subscribers = list(self._subscribers.values())
            self._metrics.increment("notify.broadcasts")
        delivered = 0
        for subscriber in subscribers:
            if self._deliver(subscriber, message):
                delivered += 1
        self.on_notify(message, delivered)
        return delivered

    def notify_to(self, subscriber_id: int, message: str) -> None:
        with self._lock:
            subscriber = self._lookup(subscriber_id)
            if subscriber is None:
                self._metrics.increment("notify_to.rejected")
            else:
                self._metrics.increment("notify.unicasts")
        if subscriber is None:
            error = InvalidId(subscriber_id)
            self.on_rejected(error)
            raise error
        delivered = self._deliver(subscriber, message)
        self.on_notify(message, 1 if delivered else 0)

    def _deliver(self, subscriber: Subscriber, message: str) -> bool:
        """Deliver to one subscriber; a failing subscriber is logged and counted, never re-raised."""
        try:
            subscriber.deliver(message)
        except Exception as e:
            with self._lock:
                self._metrics.increment("delivery.failed")
            self._logger.exception(
                "delivery_failed",
                extra={
                    "publisher_id": self.publisher_id,
                    "subscriber_id": subscriber.subscriber_id,
                    "error": str(e),
                },
            )
            return False
        with self._lock:
            self._messages_delivered += 1
            self._metrics.increment("messages.delivered")
        return True

    def __contains__(self, subscriber_id: object) -> bool:
        with self._lock:
            return self._lookup(subscriber_id) is not None

    def __len__(self) -> int:
        return self.subscriber_count

    def __repr__(self) -> str:
        return f"GroundStation(id={self.publisher_id!r}, subscribers={len(self._subscribers)})"
