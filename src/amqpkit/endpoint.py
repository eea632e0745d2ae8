""" An endpoint is the unit of work the transport layer invokes on behalf
    of an incoming message: a callable taking a processing context and a
    decoded request, returning a response. Failure is signaled by raising.
"""

from __future__ import annotations

from typing import Any, Callable

Endpoint = Callable[[Any, Any], Any]
Middleware = Callable[[Endpoint], Endpoint]


def nop(context, request):
    """ An endpoint that does nothing and returns an empty dictionary.
    """

    return dict()


def chain(outer: Middleware, *others: Middleware) -> Middleware:
    """ Compose the supplied middlewares into a single middleware. The first
        argument is the outermost: for chain(a, b, c), a request passes
        through a, then b, then c, before reaching the wrapped endpoint.
    """

    def wrap(next: Endpoint) -> Endpoint:
        for middleware in reversed(others):
            next = middleware(next)
        return outer(next)

    return wrap


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
