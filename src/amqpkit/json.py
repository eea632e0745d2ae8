""" JSON encoding and decoding for amqpkit. The orjson 'dumps' operation
    returns bytes, which is what ends up in a message body anyway; every
    caller in amqpkit should expect bytes from :func:`dumps`.
"""

import orjson

DecodeError = orjson.JSONDecodeError
EncodeError = orjson.JSONEncodeError

dumps = orjson.dumps
loads = orjson.loads

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
