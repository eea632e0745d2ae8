"""AMQP transport: bind an endpoint to deliveries arriving on a broker channel."""

from . import context
from . import error_encoder
from . import hooks
from . import message
from . import reply

from .channel import Channel, PikaChannel
from .context import ProcessingContext
from .error_encoder import (
    ErrorResponse,
    default_error_encoder,
    single_nack_requeue_error_encoder,
    reply_error_encoder,
    reply_and_ack_error_encoder,
)
from .message import Delivery, Publication
from .subscriber import (
    Subscriber,
    decode_json_request,
    encode_json_response,
    encode_nop_response,
)
