"""Subscription errors raised by publishers (one kind per failing operation)."""

# Error codes (mirrors the class names, handy for logs)
ERROR_ALREADY_SUBSCRIBED = "ALREADY_SUBSCRIBED"
ERROR_NOT_SUBSCRIBED = "NOT_SUBSCRIBED"
ERROR_INVALID_ID = "INVALID_ID"


class SubscriptionError(Exception):
    """Base class for subscription failures; always carries the offending subscriber id."""

    code = "SUBSCRIPTION_ERROR"
    description = "subscription error for subscriber {id}"

    def __init__(self, subscriber_id: int) -> None:
        super().__init__(self.description.format(id=subscriber_id))
        self.subscriber_id = subscriber_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.subscriber_id})"


class AlreadySubscribed(SubscriptionError):
    """subscribe() was called with an id that already has an entry."""

    code = ERROR_ALREADY_SUBSCRIBED
    description = "subscriber {id} is already subscribed"


class NotSubscribed(SubscriptionError):
    """unsubscribe() was called with an id that has no entry."""

    code = ERROR_NOT_SUBSCRIBED
    description = "subscriber {id} is not subscribed"


class InvalidId(SubscriptionError):
    """notify_to() was called with an id that has no entry."""

    code = ERROR_INVALID_ID
    description = "no subscriber with id {id} to notify"
