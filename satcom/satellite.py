"""Concrete Subscriber: a satellite that prints what it receives."""

import sys
from typing import TextIO

from satcom.subscriber import Subscriber


class Satellite(Subscriber):
    """Subscriber that writes each received message to an output stream (stdout by default)."""

    def __init__(self, subscriber_id: int, stream: TextIO | None = None) -> None:
        super().__init__(subscriber_id)
        self._stream = stream
        self._messages_received = 0

    @property
    def messages_received(self) -> int:
        return self._messages_received

    def receive(self, message: str) -> None:
        # stdout is looked up per call so redirected/captured output is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"Satellite {self.subscriber_id} received this message: {message}\n")
        self._messages_received += 1
        self._logger.info(
            "message_received",
            extra={"subscriber_id": self.subscriber_id, "length": len(message)},
        )
