""" The :class:`Subscriber` binds an endpoint to AMQP deliveries: each
    delivery is decoded into a request, the endpoint is invoked, and the
    response is encoded and published back to the requester.
"""

from ... import json
from ... import log
from ..base import DecodeError, EncodeError
from .context import ProcessingContext
from .error_encoder import default_error_encoder
from .message import Publication
from .reply import publish_reply


class Subscriber:
    """ Wrap an *endpoint* and provide a handler for AMQP deliveries.

        The *decode* function is called as ``decode(context, delivery)`` and
        returns the request handed to the endpoint; the endpoint is called as
        ``endpoint(context, request)`` and returns a response; the *encode*
        function is called as ``encode(context, publication, response)`` and
        fills in the outgoing :class:`Publication`. Any of the three signal
        failure by raising an exception.

        The remaining arguments are optional:

        * *before*: hooks run, in order, ahead of decoding. See
          :mod:`amqpkit.transport.amqp.hooks`.
        * *after*: hooks run, in order, after the endpoint returns and
          before the response is encoded.
        * *error_encoder*: called whenever a stage fails. The default
          ignores the error; see :mod:`amqpkit.transport.amqp.error_encoder`.
        * *finalizer*: callables invoked as ``f(context, error)`` at the
          end of every delivery, successful or not; *error* is None on
          success. A finalizer that raises is logged; the
          remaining finalizers still run.
        * *logger*: a key/value logger from :mod:`amqpkit.log` that
          receives every stage failure. By default nothing is logged.

        The subscriber keeps no per-delivery state of its own; the same
        instance can handle deliveries from several threads at once, as
        long as the channel it publishes on can too.
    """

    def __init__(self, endpoint, decode, encode, before=(), after=(),
                 error_encoder=None, finalizer=(), logger=None):

        if error_encoder is None:
            error_encoder = default_error_encoder

        if logger is None:
            logger = log.NopLogger()

        self.endpoint = endpoint
        self.decode = decode
        self.encode = encode
        self.before = tuple(before)
        self.after = tuple(after)
        self.error_encoder = error_encoder
        self.finalizer = tuple(finalizer)
        self.logger = logger


    def serve_delivery(self, channel):
        """ Return a single-argument callable that handles one delivery,
            publishing any reply on *channel*.
        """

        def handler(delivery):
            self.handle(channel, delivery)

        return handler


    def serve(self, channel, queue, consumer='', auto_ack=False, exclusive=False,
              no_local=False, no_wait=False, args=None):
        """ Consume from *queue* and handle every delivery in turn, in the
            calling thread. Returns when the channel's delivery stream ends.
        """

        handler = self.serve_delivery(channel)
        deliveries = channel.consume(queue, consumer, auto_ack, exclusive, no_local, no_wait, args)

        for delivery in deliveries:
            handler(delivery)


    def handle(self, channel, delivery):
        """ Run one *delivery* through the full pipeline. Exceptions raised by
            decode, the endpoint, encode, or the reply publish are routed to
            the error encoder and never propagate to the caller.
        """

        context = ProcessingContext()
        publication = Publication()
        error = None

        try:
            for hook in self.before:
                context = hook(context, publication, delivery)

            try:
                request = self.decode(context, delivery)
            except Exception as e:
                error = e
                self._failed('decode', context, e, delivery, channel, publication)
                return

            try:
                response = self.endpoint(context, request)
            except Exception as e:
                error = e
                self._failed('invoke', context, e, delivery, channel, publication)
                return

            for hook in self.after:
                context = hook(context, delivery, channel, publication)

            try:
                self.encode(context, publication, response)
            except Exception as e:
                error = e
                self._failed('encode', context, e, delivery, channel, publication)
                return

            try:
                publish_reply(context, delivery, channel, publication)
            except Exception as e:
                error = e
                self._failed('publish', context, e, delivery, channel, publication)
                return

        finally:
            try:
                for finalizer in self.finalizer:
                    try:
                        finalizer(context, error)
                    except Exception as e:
                        self.logger.log(stage='finalizer', err=e)
            finally:
                context.cancel()


    def _failed(self, stage, context, error, delivery, channel, publication):
        """ Log a stage failure and hand it to the error encoder. A failing
            error encoder is logged and otherwise ignored.
        """

        self.logger.log(stage=stage, err=error)

        try:
            self.error_encoder(context, error, delivery, channel, publication)
        except Exception as e:
            self.logger.log(stage='error_encoder', err=e)


# end of class Subscriber



def decode_json_request(context, delivery):
    """ Decode the delivery body as JSON and return the result.
    """

    try:
        return json.loads(delivery.body)
    except json.DecodeError as e:
        raise DecodeError('delivery body is not valid JSON: ' + str(e)) from e


def encode_json_response(context, publication, response):
    """ Marshal the *response* as JSON into the publication body.
    """

    try:
        body = json.dumps(response)
    except json.EncodeError as e:
        raise EncodeError('response is not JSON serializable: ' + str(e)) from e

    publication.body = body

    if not publication.content_type:
        publication.content_type = 'application/json'


def encode_nop_response(context, publication, response):
    """ A response encoder that does nothing, for endpoints whose response
        is not sent anywhere.
    """

    pass


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
