"""Business process exception hierarchy.

Shared across the model, the renderers, and the templating layer so
every module raises and catches the same types.
"""


class BusinessProcessError(Exception):
    """Base for all business process errors."""


class ProgrammingError(BusinessProcessError):
    """Raised on internal misuse of an API, never for user input.

    A renderer asked for its base URL before one was set is the
    typical case.
    """


class ConfigurationError(BusinessProcessError):
    """Raised when renderer configuration or the node tree is invalid."""


class NodeNotFound(BusinessProcessError, KeyError):  # noqa: N818 - mirrors KeyError
    """No node with the given name exists in the business process."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Business process has no node named {self.name!r}"
