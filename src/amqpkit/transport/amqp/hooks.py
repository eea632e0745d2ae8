""" Ready-made hooks for a :class:`amqpkit.transport.amqp.subscriber.Subscriber`.

    Before hooks are called as ``hook(context, publication, delivery)`` ahead
    of decoding; after hooks are called as
    ``hook(context, delivery, channel, publication)`` once the endpoint has
    returned. Both return the context to use for the remaining stages. Hooks
    cannot fail: they have no way to report an error, and the subscriber
    will not catch one.
"""


def set_publish_exchange(exchange):
    """ Return a before hook that sets the exchange replies are published to.
    """

    def hook(context, publication, delivery):
        return context.derive(reply_exchange=exchange)

    return hook


def set_publish_key(key):
    """ Return a before hook that sets the routing key replies are published
        with, overriding the delivery's reply_to field.
    """

    def hook(context, publication, delivery):
        return context.derive(reply_key=key)

    return hook


def set_nack_sleep_duration(seconds):
    """ Return a before hook that sets the pause used by
        :func:`amqpkit.transport.amqp.error_encoder.single_nack_requeue_error_encoder`.
    """

    def hook(context, publication, delivery):
        return context.derive(nack_sleep=seconds)

    return hook


def set_publish_delivery_mode(mode):
    """ Return a before hook that sets the delivery mode of the reply;
        1 is transient, 2 is persistent.
    """

    def hook(context, publication, delivery):
        publication.delivery_mode = mode
        return context

    return hook


def set_correlation_id(correlation_id):
    def hook(context, publication, delivery):
        publication.correlation_id = correlation_id
        return context

    return hook


def set_content_type(content_type):
    def hook(context, publication, delivery):
        publication.content_type = content_type
        return context

    return hook


def set_content_encoding(content_encoding):
    def hook(context, publication, delivery):
        publication.content_encoding = content_encoding
        return context

    return hook


def set_ack_after_endpoint(multiple=False):
    """ Return an after hook that acknowledges the delivery as soon as the
        endpoint has returned successfully, before the response is encoded
        and published.
    """

    def hook(context, delivery, channel, publication):
        delivery.ack(multiple=multiple)
        return context

    return hook


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
