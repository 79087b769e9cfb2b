"""Perch exception hierarchy.

Shared across the route table, dispatcher, and router facade so every
module raises and catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when router or route configuration is invalid.

    Always raised synchronously from the call that received the bad
    value (``Router.add()``, ``Router.set_mode()``), never deferred to
    navigation time.
    """
