"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(mode="html5", default_target="#content")
    """

    # Locator selection ("hash" or "html5", case-insensitive)
    mode: str = "hash"

    # Mount point used by routes that don't name a target
    default_target: str = "#main"

    # Log and continue when a listener raises, instead of aborting the dispatch
    isolate_listener_errors: bool = False

    # Location the host starts at when the router creates its own host
    initial_url: str = "/"
