"""Exceptions raised while building match tables."""


class RematchError(Exception):
    """Base class for match table errors."""


class InvalidArgument(RematchError, ValueError):
    """An argument was missing, of the wrong shape, or rejected by the regex engine."""
