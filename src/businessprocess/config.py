"""Renderer configuration.

RendererConfig is a frozen dataclass, immutable after creation and shared
by every renderer built for a request.
"""

from dataclasses import dataclass
from pathlib import Path

from businessprocess.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RendererConfig:
    """Renderer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RendererConfig(datetime_format="%d.%m.%Y %H:%M")
    """

    # Query parameters that trigger an action and must not survive a redirect
    action_params: tuple[str, ...] = (
        "deletenode",
        "deleteparent",
        "editnode",
        "simulationnode",
        "view",
    )

    # Query parameters that address a position inside the tree
    navigation_params: tuple[str, ...] = ("node", "path", "view")

    # States that never get a badge
    quiet_states: tuple[str, ...] = ("OK", "UP")

    # Dates
    datetime_format: str = "%Y-%m-%d %H:%M:%S"

    # Templates
    template_dirs: tuple[str | Path, ...] = ()
    autoescape: bool = True
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.datetime_format:
            raise ConfigurationError("datetime_format must not be empty")
        for name in (*self.action_params, *self.navigation_params):
            if not name:
                raise ConfigurationError("URL parameter names must not be empty")
