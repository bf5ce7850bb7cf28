"""
Exceptions raised by the geogrids converters.

Every exception derives from CoordinateConversionError, which is itself a
ValueError, and carries a `kind` that lets callers tell range, convergence,
format and consistency failures apart without parsing messages.
"""

__all__ = [
    'ConvergenceError', 'CoordinateConversionError', 'MGRSConsistencyError',
    'MGRSFormatError', 'RangeError', 'UnknownEllipsoidError',
]

from typing import Optional


class CoordinateConversionError(ValueError):
    """Base class for all conversion failures"""
    kind = 'conversion'


class RangeError(CoordinateConversionError):
    """
    A value lies outside the domain of the operation.

    Args:
        parameter:
            The name of the offending parameter, e.g. 'latitude' or 'zone'

        message: (Optional)
            Overrides the default '<parameter> out of range' message
    """
    kind = 'range'

    def __init__(self, parameter: str, message: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message or f'{parameter} out of range')


class UnknownEllipsoidError(RangeError):
    """An ellipsoid code is not present in the registry"""

    def __init__(self, code: str):
        super().__init__('ellipsoid_code', f'unknown ellipsoid code: {code!r}')


class ConvergenceError(CoordinateConversionError):
    """An iterative solve did not converge to a usable value"""
    kind = 'convergence'


class MGRSFormatError(CoordinateConversionError):
    """An MGRS string is malformed or uses letters invalid for its zone"""
    kind = 'format'


class MGRSConsistencyError(CoordinateConversionError):
    """A decoded MGRS point does not fall within its claimed latitude band"""
    kind = 'consistency'
