""" Confirm that one subscriber can be shared by several worker threads,
    and that the nack backoff only blocks the worker handling the failed
    delivery.
"""

import concurrent.futures
import threading
import time

import amqpkit
from amqpkit.transport.amqp import error_encoder, hooks


def test_backoff_blocks_one_worker(channel, acknowledger):

    lock = threading.Lock()

    class LockedChannel:
        def publish(self, *args):
            with lock:
                channel.publish(*args)

    def endpoint(context, request):
        if request['x'] < 0:
            raise ValueError('negative')
        return {'y': request['x']}

    subscriber = amqpkit.Subscriber(
        endpoint,
        amqpkit.transport.amqp.decode_json_request,
        amqpkit.transport.amqp.encode_json_response,
        before=[hooks.set_nack_sleep_duration(0.2)],
        error_encoder=error_encoder.single_nack_requeue_error_encoder,
    )
    handler = subscriber.serve_delivery(LockedChannel())

    bad = amqpkit.Delivery(body=b'{"x":-1}', reply_to='q1', delivery_tag=1, acknowledger=acknowledger)
    good = amqpkit.Delivery(body=b'{"x":1}', reply_to='q2', delivery_tag=2, acknowledger=acknowledger)

    workers = concurrent.futures.ThreadPoolExecutor(max_workers=2)

    begin = time.monotonic()
    slow = workers.submit(handler, bad)
    fast = workers.submit(handler, good)

    fast.result(timeout=1)
    fast_elapsed = time.monotonic() - begin

    slow.result(timeout=1)
    slow_elapsed = time.monotonic() - begin

    workers.shutdown()

    # The good delivery should not have waited on the backoff of the bad
    # one. The margins are generous; these only need to distinguish 'did
    # not wait' from 'waited 0.2 seconds'.

    assert fast_elapsed < 0.15
    assert slow_elapsed >= 0.2

    assert channel.published == [('', 'q2', False, False, b'{"y":1}', '')]
    assert acknowledger.calls == [('nack', 1, False, True)]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
