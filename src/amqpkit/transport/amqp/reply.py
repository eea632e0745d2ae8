""" Reply routing shared by the subscriber's success path and the reply
    error encoders.
"""


def reply_target(context, delivery):
    """ Return the (exchange, routing key) pair a reply to *delivery* should
        be published to. A reply key set on the *context* takes precedence
        over the delivery's own reply_to field.
    """

    exchange = context.reply_exchange or ''
    key = context.reply_key

    if not key:
        key = delivery.reply_to

    return exchange, key


def publish_reply(context, delivery, channel, publication):
    """ Publish *publication* as the reply to *delivery*. The publication
        inherits the delivery's correlation identifier unless one was
        already set. Exceptions raised by the channel propagate.
    """

    if not publication.correlation_id:
        publication.correlation_id = delivery.correlation_id

    exchange, key = reply_target(context, delivery)

    channel.publish(
        exchange,
        key,
        False,      # mandatory
        False,      # immediate
        publication,
    )


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
