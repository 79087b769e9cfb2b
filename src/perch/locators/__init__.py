"""Locators — observe the host location and emit ``redirect`` events.

One locator per routing mode. The router picks a class from
``LOCATORS`` by mode name and constructs it with the shared host, so
switching modes keeps the current location.
"""

from perch.locators.base import REDIRECT, Locator, LocatorHandler
from perch.locators.hash import HashLocator
from perch.locators.html5 import HTML5Locator

LOCATORS: dict[str, type[Locator]] = {
    "hash": HashLocator,
    "html5": HTML5Locator,
}

__all__ = [
    "LOCATORS",
    "REDIRECT",
    "HTML5Locator",
    "HashLocator",
    "Locator",
    "LocatorHandler",
]
