"""Transport layer implementations."""

from .base import (
    TransportError,
    DeliveryError,
    DecodeError,
    InvocationError,
    EncodeError,
    PublishError,
)

from . import amqp
