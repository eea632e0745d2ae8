"""Key/value logging collaborators.

A logger here is anything with a ``log(**keyvals)`` method. The subscriber
only ever emits diagnostics through this interface; the default logger
discards everything.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional


class Logger(ABC):
    """Minimal contract for a key/value logger."""

    @abstractmethod
    def log(self, **keyvals: Any) -> None:
        """Record one event described by *keyvals*."""


class NopLogger(Logger):
    """Discard every record."""

    def log(self, **keyvals: Any) -> None:
        pass


class StdlibLogger(Logger):
    """Render key/value pairs onto a standard library logger.

    Records are formatted as space separated ``key=value`` pairs, in the
    order the keywords were supplied.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.ERROR):
        self.logger = logger or logging.getLogger('amqpkit')
        self.level = level

    def log(self, **keyvals: Any) -> None:
        if not self.logger.isEnabledFor(self.level):
            return

        line = ' '.join('%s=%s' % (key, _format(value)) for key, value in keyvals.items())
        self.logger.log(self.level, line)


def _format(value: Any) -> str:
    if isinstance(value, BaseException):
        text = str(value)
        if text == '':
            return type(value).__name__
        return repr(text)

    if isinstance(value, str):
        if value == '' or ' ' in value:
            return repr(value)
        return value

    return str(value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
