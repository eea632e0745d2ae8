""" Connection and runtime settings. Values are read from the environment
    once, at import time; the functions below accept explicit arguments
    for anything that needs to differ from the environment.
"""

import os

import pika


broker_host = os.environ.get('AMQPKIT_AMQP_HOST', 'localhost')
broker_port = int(os.environ.get('AMQPKIT_AMQP_PORT', '5672'))
broker_vhost = os.environ.get('AMQPKIT_AMQP_VHOST', '/')
broker_user = os.environ.get('AMQPKIT_AMQP_USER', 'guest')
broker_password = os.environ.get('AMQPKIT_AMQP_PASSWORD', 'guest')

heartbeat = 600
blocked_connection_timeout = 300

# Seconds to pause after a nack/requeue when the processing context does
# not carry its own duration.

nack_sleep = float(os.environ.get('AMQPKIT_NACK_SLEEP', '10'))


def broker_params(host=None, port=None, vhost=None, user=None, password=None):
    """ Return a :class:`pika.ConnectionParameters` instance for the broker.
        Any argument left as None is filled in from the environment-derived
        module defaults.
    """

    if host is None:
        host = broker_host
    if port is None:
        port = broker_port
    if vhost is None:
        vhost = broker_vhost
    if user is None:
        user = broker_user
    if password is None:
        password = broker_password

    credentials = pika.PlainCredentials(user, password)

    return pika.ConnectionParameters(
        host=host,
        port=int(port),
        virtual_host=vhost,
        credentials=credentials,
        heartbeat=heartbeat,
        blocked_connection_timeout=blocked_connection_timeout,
    )


def connect(**kwargs):
    """ Open and return a :class:`pika.BlockingConnection`; keyword arguments
        are passed through to :func:`broker_params`.
    """

    return pika.BlockingConnection(broker_params(**kwargs))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
