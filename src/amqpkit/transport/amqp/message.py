""" Passive representations of AMQP messages: the :class:`Delivery` that
    arrives from the broker, and the :class:`Publication` assembled as a
    reply.
"""

import types

import pika

from ..base import DeliveryError


class Delivery:
    """ A :class:`Delivery` is a read-only view of a single message received
        from the broker. In addition to the message itself it carries what is
        needed to settle the message with the broker: the *delivery_tag*,
        and an *acknowledger*. The acknowledger can be any object with
        basic_ack(), basic_nack(), and basic_reject() methods matching the
        signatures of a :class:`pika.channel.Channel`; in practice it is
        usually the pika channel the message arrived on.

        Any attempt to modify a :class:`Delivery` after it is constructed
        will raise an AttributeError.

        :ivar body: The raw message body, as bytes.
        :ivar correlation_id: The correlation identifier, possibly empty.
        :ivar reply_to: The requested reply routing key, possibly empty.
        :ivar headers: A read-only mapping of application headers.
    """

    def __init__(self, body=b'', correlation_id='', reply_to='', delivery_tag=0,
                 acknowledger=None, exchange='', routing_key='', redelivered=False,
                 consumer_tag='', headers=None, content_type='', content_encoding='',
                 message_id='', type='', app_id=''):

        if headers is None:
            headers = dict()
        else:
            headers = dict(headers)

        headers = types.MappingProxyType(headers)

        self.body = bytes(body)
        self.correlation_id = correlation_id or ''
        self.reply_to = reply_to or ''
        self.delivery_tag = delivery_tag
        self.acknowledger = acknowledger
        self.exchange = exchange or ''
        self.routing_key = routing_key or ''
        self.redelivered = bool(redelivered)
        self.consumer_tag = consumer_tag or ''
        self.headers = headers
        self.content_type = content_type or ''
        self.content_encoding = content_encoding or ''
        self.message_id = message_id or ''
        self.type = type or ''
        self.app_id = app_id or ''

        self._sealed = True


    def __setattr__(self, name, value):
        if getattr(self, '_sealed', False):
            raise AttributeError('Delivery instances are read-only')

        object.__setattr__(self, name, value)


    def __repr__(self):
        return 'Delivery(tag=%r, correlation_id=%r, reply_to=%r, body=%r)' % (
                self.delivery_tag, self.correlation_id, self.reply_to, self.body)


    @classmethod
    def from_pika(cls, channel, method, properties, body):
        """ Build a :class:`Delivery` from the (method, properties, body)
            triple pika hands to a consumer. The *channel* is retained as
            the acknowledger.
        """

        return cls(
            body=body,
            correlation_id=properties.correlation_id,
            reply_to=properties.reply_to,
            delivery_tag=method.delivery_tag,
            acknowledger=channel,
            exchange=method.exchange,
            routing_key=method.routing_key,
            redelivered=method.redelivered,
            consumer_tag=getattr(method, 'consumer_tag', ''),
            headers=properties.headers,
            content_type=properties.content_type,
            content_encoding=properties.content_encoding,
            message_id=properties.message_id,
            type=properties.type,
            app_id=properties.app_id,
        )


    def _check(self):
        if self.acknowledger is None:
            raise DeliveryError('delivery %r has no acknowledger' % (self.delivery_tag,))


    def ack(self, multiple=False):
        """ Acknowledge this delivery. With *multiple* set, every earlier
            unacknowledged delivery on the same channel is acknowledged too.
        """

        self._check()
        self.acknowledger.basic_ack(delivery_tag=self.delivery_tag, multiple=multiple)


    def nack(self, multiple=False, requeue=True):
        """ Negatively acknowledge this delivery, optionally asking the broker
            to *requeue* it.
        """

        self._check()
        self.acknowledger.basic_nack(delivery_tag=self.delivery_tag, multiple=multiple, requeue=requeue)


    def reject(self, requeue=True):
        self._check()
        self.acknowledger.basic_reject(delivery_tag=self.delivery_tag, requeue=requeue)


# end of class Delivery



class Publication:
    """ A :class:`Publication` is the outgoing message under construction.
        One is created for every delivery handled by a subscriber; hooks,
        the response encoder, and error encoders all fill in fields as the
        delivery moves through the pipeline. Empty strings and zeroes are
        treated as unset when the publication is handed to pika.
    """

    def __init__(self, body=b'', correlation_id='', headers=None):

        if headers is None:
            headers = dict()

        self.body = body
        self.correlation_id = correlation_id
        self.headers = headers

        self.content_type = ''
        self.content_encoding = ''
        self.delivery_mode = 0
        self.priority = 0
        self.reply_to = ''
        self.expiration = ''
        self.message_id = ''
        self.timestamp = None
        self.type = ''
        self.user_id = ''
        self.app_id = ''


    def __repr__(self):
        return 'Publication(correlation_id=%r, body=%r)' % (self.correlation_id, self.body)


    def properties(self):
        """ Return the :class:`pika.BasicProperties` describing this
            publication.
        """

        return pika.BasicProperties(
            content_type=self.content_type or None,
            content_encoding=self.content_encoding or None,
            headers=self.headers or None,
            delivery_mode=self.delivery_mode or None,
            priority=self.priority or None,
            correlation_id=self.correlation_id or None,
            reply_to=self.reply_to or None,
            expiration=self.expiration or None,
            message_id=self.message_id or None,
            timestamp=self.timestamp,
            type=self.type or None,
            user_id=self.user_id or None,
            app_id=self.app_id or None,
        )


# end of class Publication


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
