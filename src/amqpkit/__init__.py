""" Python implementation of an AMQP transport for endpoints. An endpoint
    is a plain callable handling one request; the transport layer decodes
    broker deliveries into requests, invokes the endpoint, and publishes the
    response to the requester's reply queue.
"""

# Utility components.

from . import json
from . import log

# Submodules used by multiple other components.

from . import config
from . import endpoint

# Primary public-facing interfaces.

from . import transport
from .transport.amqp import Subscriber, Delivery, Publication, ProcessingContext

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
