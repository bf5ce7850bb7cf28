"""
Package logger for geogrids.

Conversions never log on success. The logger carries the one-time notices a
converter raises about its own setup, such as a Transverse Mercator
projection built on an ellipsoid outside the flattening range its series
were validated for.
"""

__all__ = ['LOGGER', 'clear_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('geogrids')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_EMITTED = set()


def warn_once(warning: str):
    """
    Logs a conversion notice at WARNING level, unless the identical message
    has already been logged by this process.

    Args:
        warning:
            The full message; messages that differ in any detail are
            logged separately
    """
    if warning in _EMITTED:
        return

    LOGGER.warning(warning)
    _EMITTED.add(warning)


def clear_warnings():
    """Resets warn_once, so that each notice is logged again on its next use"""
    _EMITTED.clear()
