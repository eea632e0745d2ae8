""" Per-delivery processing context. A :class:`ProcessingContext` travels
    with a single delivery through every stage of a subscriber, carrying
    reply overrides, the nack backoff, free-form values added by hooks, and
    a cancellation signal.
"""

import threading
import types


class ProcessingContext:
    """ Immutable bag of per-delivery settings. Hooks never modify a context
        in place; they call :func:`derive` or :func:`with_value` and return
        the result, and the subscriber threads the returned context into the
        next stage. Every context derived from the same root shares one
        cancellation signal.

        :ivar reply_exchange: Exchange for the reply; empty string is the
            default exchange.
        :ivar reply_key: Routing key for the reply. When empty the delivery's
            own reply_to field is used.
        :ivar nack_sleep: Seconds to pause after a nack/requeue, or None to
            use :data:`amqpkit.config.nack_sleep`.
        :ivar values: Read-only mapping of arbitrary values added by hooks.
    """

    _fields = ('reply_exchange', 'reply_key', 'nack_sleep')

    def __init__(self, reply_exchange='', reply_key='', nack_sleep=None, values=None, done=None):

        if values is None:
            values = dict()

        if done is None:
            done = threading.Event()

        object.__setattr__(self, 'reply_exchange', reply_exchange)
        object.__setattr__(self, 'reply_key', reply_key)
        object.__setattr__(self, 'nack_sleep', nack_sleep)
        object.__setattr__(self, 'values', types.MappingProxyType(dict(values)))
        object.__setattr__(self, '_done', done)


    def __setattr__(self, name, value):
        raise AttributeError('ProcessingContext instances are read-only; use derive()')


    def __repr__(self):
        return 'ProcessingContext(reply_exchange=%r, reply_key=%r, nack_sleep=%r, values=%r)' % (
                self.reply_exchange, self.reply_key, self.nack_sleep, dict(self.values))


    def derive(self, **changes):
        """ Return a new context with the named fields replaced. Unknown
            field names raise a TypeError.
        """

        arguments = dict()
        for field in self._fields:
            arguments[field] = changes.pop(field, getattr(self, field))

        if changes:
            raise TypeError('unknown context fields: ' + ', '.join(sorted(changes)))

        return ProcessingContext(values=self.values, done=self._done, **arguments)


    def with_value(self, key, value):
        """ Return a new context with *key* set to *value* in :attr:`values`.
        """

        values = dict(self.values)
        values[key] = value
        return ProcessingContext(self.reply_exchange, self.reply_key, self.nack_sleep, values, self._done)


    def value(self, key, default=None):
        return self.values.get(key, default)


    def cancel(self):
        """ Release the cancellation signal. Safe to call more than once.
        """

        self._done.set()


    @property
    def cancelled(self):
        return self._done.is_set()


    def wait(self, timeout=None):
        """ Block until the context is cancelled, or *timeout* seconds have
            elapsed. Returns True if the context was cancelled.
        """

        return self._done.wait(timeout)


# end of class ProcessingContext


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
