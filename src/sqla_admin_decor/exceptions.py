"""Exception hierarchy for sqla-admin-decor."""

from __future__ import annotations

__all__ = [
    "DOCUMENTATION_URL",
    "AdminDecorError",
    "ConfigurationError",
    "UnknownResourceError",
]

DOCUMENTATION_URL = "https://sqla-admin-decor.readthedocs.io/en/latest"


class AdminDecorError(Exception):
    """Base exception for all sqla-admin-decor errors."""


class ConfigurationError(AdminDecorError):
    """Resource options do not match what the resource exposes.

    Raised when a property path named in the options (a per-context
    ordering override or a direct lookup) does not resolve to a known or
    synthesized property, and for malformed option mappings.

    Attributes:
        path: The offending property path, when there is one.
        resource_name: Name of the resource being configured.
        link: Full URL of the documentation page explaining the option.

    Example::

        try:
            decorator.get_property_by_key("nope")
        except ConfigurationError as exc:
            print(exc.path, exc.resource_name, exc.link)
    """

    def __init__(
        self,
        message: str,
        link: str | None = None,
        *,
        path: str | None = None,
        resource_name: str | None = None,
    ) -> None:
        self.path = path
        self.resource_name = resource_name
        self.link = f"{DOCUMENTATION_URL}/{link}" if link else None
        if self.link is not None:
            message = f"{message}. More information: {self.link}"
        super().__init__(message)


class UnknownResourceError(AdminDecorError):
    """No decorated resource is registered under the given id.

    Attributes:
        resource_id: The id that was looked up.
    """

    def __init__(self, *, resource_id: str) -> None:
        self.resource_id = resource_id
        super().__init__(f"No resource registered with id {resource_id!r}")
