"""
Custom exception classes for typeshape.

Core inference errors are never retried: every step is pure, so a retry
would reproduce the same failure. They propagate to whoever called the
pipeline, which decides whether to drop the offending sample and try again.
"""

from typing import Any


class TypeshapeException(Exception):
    """Base exception class for all typeshape exceptions."""

    pass


class UnsupportedValueKindError(TypeshapeException):
    """
    Raised when a sample (or a value nested in it) has no type mapping.

    Only JSON-like values are understood: strings, numbers, booleans, None,
    lists/tuples, string-keyed mappings and the UNDEFINED sentinel. Anything
    else (functions, sets, bytes, datetimes, ...) aborts inference for the
    whole batch.

    Example:
        >>> raise UnsupportedValueKindError(value=b"raw", path="$.payload")
    """

    def __init__(self, value: Any, path: str = "$"):
        self.value = value
        self.path = path
        super().__init__(
            f"Unable to interpret type of {value!r} ({type(value).__name__}) at {path}"
        )


class InternalInvariantViolation(TypeshapeException):
    """Raised when the unifier finds its own bookkeeping inconsistent. Always a bug."""

    pass


class NoSamplesError(TypeshapeException):
    """Raised when inference is asked to run over an empty sample sequence."""

    pass


class ConnectorError(TypeshapeException):
    """Raised when an input source does not hold a sequence of samples."""

    pass
