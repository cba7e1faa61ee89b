"""Dispatcher configuration.

DispatcherConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class DispatcherConfig:
    """Dispatcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DispatcherConfig(routes=(("/", index), ("/<slug>", page)))
        dispatcher = Dispatcher(config)
    """

    # Route specifications, compiled in order when the config is applied
    routes: tuple[Any, ...] = ()

    # Raise ConfigurationError on unrecognized configure() input instead of ignoring it
    strict: bool = True
