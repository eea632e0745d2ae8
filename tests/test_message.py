from unittest import mock

import pika
import pytest

import amqpkit


def test_delivery_read_only(delivery):

    with pytest.raises(AttributeError):
        delivery.body = b'other'

    with pytest.raises(AttributeError):
        delivery.reply_to = 'q2'

    assert delivery.body == b'{"x":1}'


def test_delivery_defaults():

    delivery = amqpkit.Delivery(correlation_id=None, reply_to=None)

    assert delivery.body == b''
    assert delivery.correlation_id == ''
    assert delivery.reply_to == ''
    assert delivery.headers == {}
    assert delivery.redelivered == False


def test_delivery_headers_read_only():

    original = {'attempt': 1}
    delivery = amqpkit.Delivery(headers=original)

    with pytest.raises(TypeError):
        delivery.headers['attempt'] = 2

    original['attempt'] = 3

    assert delivery.headers == {'attempt': 1}


def test_settlement(delivery, acknowledger):

    delivery.ack()
    delivery.ack(multiple=True)
    delivery.nack()
    delivery.nack(multiple=True, requeue=False)
    delivery.reject()
    delivery.reject(requeue=False)

    assert acknowledger.calls == [
        ('ack', 7, False),
        ('ack', 7, True),
        ('nack', 7, False, True),
        ('nack', 7, True, False),
        ('reject', 7, True),
        ('reject', 7, False),
    ]


def test_settlement_without_acknowledger():

    delivery = amqpkit.Delivery(body=b'orphan')

    with pytest.raises(amqpkit.transport.DeliveryError):
        delivery.ack()

    with pytest.raises(amqpkit.transport.DeliveryError):
        delivery.nack()

    with pytest.raises(amqpkit.transport.DeliveryError):
        delivery.reject()


def test_from_pika():

    channel = mock.Mock()
    method = pika.spec.Basic.Deliver(consumer_tag='ctag', delivery_tag=42,
                                     redelivered=True, exchange='ex', routing_key='rk')
    properties = pika.BasicProperties(correlation_id='abc', reply_to='q1',
                                      headers={'h': 'v'}, content_type='application/json')

    delivery = amqpkit.Delivery.from_pika(channel, method, properties, b'body')

    assert delivery.body == b'body'
    assert delivery.correlation_id == 'abc'
    assert delivery.reply_to == 'q1'
    assert delivery.delivery_tag == 42
    assert delivery.exchange == 'ex'
    assert delivery.routing_key == 'rk'
    assert delivery.redelivered == True
    assert delivery.consumer_tag == 'ctag'
    assert delivery.headers == {'h': 'v'}
    assert delivery.content_type == 'application/json'
    assert delivery.message_id == ''

    delivery.nack(requeue=False)
    channel.basic_nack.assert_called_once_with(delivery_tag=42, multiple=False, requeue=False)


def test_publication_properties():

    publication = amqpkit.Publication(body=b'{}', correlation_id='abc')
    publication.content_type = 'application/json'
    publication.delivery_mode = 2

    properties = publication.properties()

    assert properties.correlation_id == 'abc'
    assert properties.content_type == 'application/json'
    assert properties.delivery_mode == 2
    assert properties.reply_to is None
    assert properties.headers is None
    assert properties.priority is None


def test_publication_headers_independent():

    first = amqpkit.Publication()
    second = amqpkit.Publication()
    first.headers['a'] = 1

    assert second.headers == {}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
