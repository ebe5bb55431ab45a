"""Exceptions raised for caller contract violations."""

from __future__ import annotations


class BinpackError(Exception):
    """Base class for binpack errors."""


class InvalidArgument(BinpackError, ValueError):
    """A setter or lookup received a malformed value."""


class InvalidRotation(InvalidArgument):
    """A rotation index outside 0..5 was used."""
