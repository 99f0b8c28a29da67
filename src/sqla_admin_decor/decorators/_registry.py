"""ResourceRegistry — decorated resources of one admin panel."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from sqla_admin_decor._types import ResourceLike
from sqla_admin_decor.actions._base import Action
from sqla_admin_decor.config._config import AdminConfig
from sqla_admin_decor.decorators._options import ResourceOptions
from sqla_admin_decor.decorators._resource import ResourceDecorator
from sqla_admin_decor.exceptions import ConfigurationError, UnknownResourceError

__all__ = ["ResourceRegistry", "get_default_registry"]


class ResourceRegistry:
    """Maps resource ids to their ``ResourceDecorator``.

    Populated once at startup and read-only afterwards. Registration
    validates the options, so configuration errors surface before the
    admin serves requests.

    Example::

        registry = ResourceRegistry()
        registry.register(SQLAlchemyResource(Post), ResourceOptions(parent="Blog"))
        registry.lookup("posts").to_json(current_admin)
    """

    def __init__(self) -> None:
        self._decorators: dict[str, ResourceDecorator] = {}

    def register(
        self,
        resource: ResourceLike,
        options: ResourceOptions | Mapping[str, Any] | None = None,
        *,
        config: AdminConfig | None = None,
        actions: Mapping[str, Action] | None = None,
    ) -> ResourceDecorator:
        """Decorate ``resource`` and store the decorator under its id.

        Args:
            resource: The adapter resource.
            options: ``ResourceOptions`` or an equivalent plain mapping.
            config: Optional admin config. Defaults to the global config.
            actions: Optional built-in action set.

        Returns:
            The new ``ResourceDecorator``.

        Raises:
            ConfigurationError: If the id is already registered or the
                options do not match the resource.
        """
        resource_id = resource.id()
        if resource_id in self._decorators:
            raise ConfigurationError(f"resource {resource_id!r} is already registered")
        if isinstance(options, Mapping):
            options = ResourceOptions.from_mapping(options)
        decorator = ResourceDecorator(resource, options=options, config=config, actions=actions)
        decorator.validate()
        self._decorators[resource_id] = decorator
        return decorator

    def lookup(self, resource_id: str) -> ResourceDecorator:
        """Return the decorator registered under ``resource_id``.

        Raises:
            UnknownResourceError: If nothing is registered under the id.
        """
        try:
            return self._decorators[resource_id]
        except KeyError:
            raise UnknownResourceError(resource_id=resource_id) from None

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._decorators

    def __iter__(self) -> Iterator[ResourceDecorator]:
        return iter(list(self._decorators.values()))

    def __len__(self) -> int:
        return len(self._decorators)

    def to_json(self, current_admin: Any = None) -> list[dict[str, Any]]:
        """Snapshots of every resource, in registration order."""
        return [d.to_json(current_admin) for d in self._decorators.values()]

    def clear(self) -> None:
        """Remove all registered resources."""
        self._decorators.clear()


# Module-level default registry (singleton).
_default_registry = ResourceRegistry()


def get_default_registry() -> ResourceRegistry:
    """Return the global default (singleton) resource registry."""
    return _default_registry
