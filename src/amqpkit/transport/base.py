"""Transport exceptions.

The subscriber does not distinguish between these; any exception raised by
a pipeline stage is routed to the configured error encoder. They exist so
that codecs, channels and custom error encoders can signal and inspect which
stage failed.
"""

from __future__ import annotations


class TransportError(Exception):
    """Base class for all transport-layer errors."""


class DeliveryError(TransportError):
    """A delivery could not be acknowledged or rejected."""


class DecodeError(TransportError):
    """An incoming delivery could not be decoded into a request."""


class InvocationError(TransportError):
    """The endpoint failed to produce a response."""


class EncodeError(TransportError):
    """A response could not be encoded into the outgoing publication."""


class PublishError(TransportError):
    """The broker refused, or could not accept, an outgoing publication."""
