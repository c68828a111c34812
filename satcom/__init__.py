"""Observer pattern demo: a ground station notifying satellites (in-memory, synchronous)."""

from satcom.errors import AlreadySubscribed, InvalidId, NotSubscribed, SubscriptionError
from satcom.subscriber import Subscriber
from satcom.publisher import Publisher
from satcom.satellite import Satellite
from satcom.ground_station import GroundStation

__all__ = [
    "Subscriber",
    "Publisher",
    "Satellite",
    "GroundStation",
    "SubscriptionError",
    "AlreadySubscribed",
    "NotSubscribed",
    "InvalidId",
]
