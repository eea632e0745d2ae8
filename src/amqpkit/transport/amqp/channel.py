"""Channel interface.

This is the (small) contract a subscriber needs from a broker client: publish
a message, and iterate over the deliveries arriving on a queue. Anything
implementing it can stand in for a real broker channel, which is how the
subscriber is tested.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional

import pika.exceptions

from ..base import PublishError
from .message import Delivery, Publication

logger = logging.getLogger(__name__)


class Channel(ABC):
    """Minimal contract for a broker channel."""

    @abstractmethod
    def publish(self, exchange: str, key: str, mandatory: bool, immediate: bool, msg: Publication) -> None:
        """Publish *msg* to *exchange* with routing *key*; raise on failure."""

    @abstractmethod
    def consume(
        self,
        queue: str,
        consumer: str = '',
        auto_ack: bool = False,
        exclusive: bool = False,
        no_local: bool = False,
        no_wait: bool = False,
        args: Optional[Dict[str, Any]] = None,
    ) -> Iterator[Delivery]:
        """Return an iterator over the deliveries arriving on *queue*."""


class PikaChannel(Channel):
    """Channel backed by a pika :class:`BlockingChannel`.

    The blocking channel is not thread-safe; a PikaChannel must only be used
    from the thread that owns its connection.
    """

    def __init__(self, channel, inactivity_timeout: Optional[float] = None):
        self.channel = channel
        self.inactivity_timeout = inactivity_timeout

    def publish(self, exchange: str, key: str, mandatory: bool, immediate: bool, msg: Publication) -> None:
        # RabbitMQ dropped support for the immediate flag, and pika never
        # exposed it.
        if immediate:
            raise PublishError('the immediate flag is not supported')

        try:
            self.channel.basic_publish(
                exchange=exchange,
                routing_key=key,
                body=msg.body,
                properties=msg.properties(),
                mandatory=mandatory,
            )
        except pika.exceptions.AMQPError as e:
            raise PublishError(f"publish to {exchange!r}/{key!r} failed: {e!r}") from e

    def consume(
        self,
        queue: str,
        consumer: str = '',
        auto_ack: bool = False,
        exclusive: bool = False,
        no_local: bool = False,
        no_wait: bool = False,
        args: Optional[Dict[str, Any]] = None,
    ) -> Iterator[Delivery]:
        if no_local or no_wait:
            logger.debug("consume %r: no_local/no_wait are not supported by pika, ignoring", queue)

        stream = self.channel.consume(
            queue,
            auto_ack=auto_ack,
            exclusive=exclusive,
            arguments=args,
            inactivity_timeout=self.inactivity_timeout,
            consumer_tag=consumer or None,
        )

        for method, properties, body in stream:
            if method is None:
                # Inactivity timeout expired with nothing to deliver.
                continue
            yield Delivery.from_pika(self.channel, method, properties, body)

    def cancel(self) -> None:
        """Stop consuming; any iterator returned by consume() will end."""
        self.channel.cancel()
