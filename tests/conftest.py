import pytest

import amqpkit


class FakeAcknowledger:
    """ Records every settlement call made against deliveries that carry it.
    """

    def __init__(self):
        self.calls = list()

    def basic_ack(self, delivery_tag, multiple=False):
        self.calls.append(('ack', delivery_tag, multiple))

    def basic_nack(self, delivery_tag, multiple=False, requeue=True):
        self.calls.append(('nack', delivery_tag, multiple, requeue))

    def basic_reject(self, delivery_tag, requeue=True):
        self.calls.append(('reject', delivery_tag, requeue))


class FakeChannel(amqpkit.transport.amqp.Channel):
    """ In-memory channel. Published messages are recorded as
        (exchange, key, mandatory, immediate, body, correlation_id) tuples;
        setting *error* makes every publish raise it.
    """

    def __init__(self, deliveries=(), error=None):
        self.deliveries = list(deliveries)
        self.error = error
        self.published = list()
        self.consumed = list()

    def publish(self, exchange, key, mandatory, immediate, msg):
        if self.error is not None:
            raise self.error

        record = (exchange, key, mandatory, immediate, msg.body, msg.correlation_id)
        self.published.append(record)

    def consume(self, queue, consumer='', auto_ack=False, exclusive=False,
                no_local=False, no_wait=False, args=None):
        self.consumed.append(queue)
        return iter(self.deliveries)


@pytest.fixture
def acknowledger():
    return FakeAcknowledger()


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def delivery(acknowledger):
    return amqpkit.Delivery(
        body=b'{"x":1}',
        correlation_id='abc',
        reply_to='q1',
        delivery_tag=7,
        acknowledger=acknowledger,
    )


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
