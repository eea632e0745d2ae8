""" A minimal request/reply service: requests arrive on the 'adder' queue
    as JSON objects with 'a' and 'b' fields, and the sum is published back
    to the requester's reply_to queue. Deliveries are consumed with auto_ack
    set, so the broker considers them settled on arrival; requests that
    cannot be handled get an error reply instead of a sum.

    Broker settings come from the AMQPKIT_AMQP_* environment variables.
"""

import logging
import sys

import amqpkit
from amqpkit.transport import amqp


def add(context, request):
    return {'sum': request['a'] + request['b']}


def finished(context, error):
    if error is None:
        logging.getLogger('adder').debug('request handled')


def main():

    logging.basicConfig(level=logging.INFO)

    connection = amqpkit.config.connect()
    channel = connection.channel()
    channel.queue_declare(queue='adder')

    subscriber = amqp.Subscriber(
        add,
        amqp.decode_json_request,
        amqp.encode_json_response,
        error_encoder=amqp.reply_error_encoder,
        finalizer=[finished],
        logger=amqpkit.log.StdlibLogger(logging.getLogger('adder')),
    )

    try:
        subscriber.serve(amqp.PikaChannel(channel), 'adder', auto_ack=True)
    except KeyboardInterrupt:
        pass
    finally:
        connection.close()


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
