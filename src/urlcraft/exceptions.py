"""src/urlcraft/exceptions.py

Urlcraft Exceptions hierarchy.
"""

from typing import Any


class UrlcraftError(Exception):
    """Base exception for all Urlcraft errors."""


class InvalidPortError(UrlcraftError, ValueError, TypeError):
    """
    Port is not an integer or lies outside the unsigned 16-bit range.

    Subclasses both ValueError and TypeError so callers can catch it
    the way they would catch the builtin equivalent.
    """

    def __init__(self, port: Any):
        super().__init__(f"Port must be an integer in range 0-65535, got {port!r}")
        self.port = port
