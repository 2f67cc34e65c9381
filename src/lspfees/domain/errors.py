"""Domain-specific exceptions."""

from __future__ import annotations


class FeeMenuUnavailableError(Exception):
    """Raised when fee settings could not be fetched from the store."""


class PromiseEncodingError(Exception):
    """Raised when fee params cannot be canonically encoded for hashing."""


class PromiseSigningError(Exception):
    """Raised when a promise cannot be produced with the given key."""


class InvalidPromiseError(Exception):
    """Raised when a promise was not produced by the expected key."""
