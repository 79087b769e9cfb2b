"""Resolve ``"module:attribute"`` import strings to a Router."""

import importlib

from perch.router import Router


def resolve_router(import_string: str) -> Router:
    """Import ``module`` and return its ``attribute`` (default ``router``).

    Raises ``ModuleNotFoundError`` / ``AttributeError`` when the lookup
    fails and ``TypeError`` when the object is not a Router.
    """
    module_path, _, attr_name = import_string.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "router")
    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a perch Router."
        raise TypeError(msg)
    return obj
