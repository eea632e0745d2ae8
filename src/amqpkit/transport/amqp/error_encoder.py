""" Error encoders decide what happens to a delivery when any stage of a
    subscriber fails. Every encoder is called the same way::

        encoder(context, error, delivery, channel, publication)

    and returns nothing. The subscriber does not acknowledge or reject
    deliveries on its own; if the chosen encoder does not settle the
    delivery, nothing will. Encoders cannot tell which stage failed other
    than by inspecting the *error*; custom encoders wanting different
    handling for decode and endpoint failures should check the exception
    type.
"""

import time

from ... import config
from ... import json
from .reply import publish_reply


class ErrorResponse:
    """ The default structure of replies in the event of an error.
    """

    def __init__(self, error):
        self.error = str(error)


    def to_dict(self):
        return {'err': self.error}


    def encapsulate(self):
        return json.dumps(self.to_dict())


# end of class ErrorResponse



def default_error_encoder(context, error, delivery, channel, publication):
    """ Ignore the error entirely: no reply, and the delivery is neither
        acknowledged nor rejected.
    """

    pass


def single_nack_requeue_error_encoder(context, error, delivery, channel, publication):
    """ Nack the delivery, without the multiple flag and with requeue set,
        then pause the calling thread. The pause keeps a message that fails
        every time from cycling between the broker and this consumer as fast
        as the network allows. The pause duration comes from the context's
        nack_sleep, falling back to :data:`amqpkit.config.nack_sleep`. No
        reply is published.
    """

    delivery.nack(multiple=False, requeue=True)

    duration = context.nack_sleep
    if duration is None:
        duration = config.nack_sleep

    time.sleep(duration)


def reply_error_encoder(context, error, delivery, channel, publication):
    """ Serialize the error as an :class:`ErrorResponse` and publish it to
        the reply destination, resolved the same way as a successful
        response. The delivery is not acknowledged.
    """

    try:
        body = ErrorResponse(error).encapsulate()
    except json.EncodeError:
        return

    publication.body = body
    publish_reply(context, delivery, channel, publication)


def reply_and_ack_error_encoder(context, error, delivery, channel, publication):
    """ Publish the error reply as :func:`reply_error_encoder` does, then
        acknowledge the original delivery.
    """

    # The acknowledgement goes out even if the reply could not be published.

    try:
        reply_error_encoder(context, error, delivery, channel, publication)
    finally:
        delivery.ack(multiple=False)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
