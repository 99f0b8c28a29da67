"""ResourceDecorator — presentation model of a whole resource."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from sqla_admin_decor._types import PROPERTY_PLACES, PropertyPlace, RecordLike, ResourceLike
from sqla_admin_decor._view_helpers import ViewHelpers
from sqla_admin_decor.actions._base import Action
from sqla_admin_decor.actions._defaults import DEFAULT_ACTIONS
from sqla_admin_decor.adapters._base import BaseProperty
from sqla_admin_decor.config._config import AdminConfig, get_global_config
from sqla_admin_decor.decorators._action import ActionDecorator
from sqla_admin_decor.decorators._options import ParentOptions, ResourceOptions
from sqla_admin_decor.decorators._property import PropertyDecorator
from sqla_admin_decor.exceptions import ConfigurationError

__all__ = ["ResourceDecorator"]

_PROPERTIES_DOCS = "customizing-resources.html"


class ResourceDecorator:
    """Reconciles a resource, its options and the default actions.

    Built once per resource when the admin is configured and read-only
    afterwards: every query is a pure function of the decorated state and
    its arguments. To change options, build a new decorator.

    Args:
        resource: The adapter resource being decorated.
        options: User customization. Defaults to no customization.
        config: Admin config. Defaults to the global config.
        actions: The built-in action set. Defaults to ``DEFAULT_ACTIONS``.

    Example::

        decorator = ResourceDecorator(
            SQLAlchemyResource(Post),
            options=ResourceOptions(list_properties=["title", "is_published"]),
        )
        decorator.to_json(current_admin)
    """

    def __init__(
        self,
        resource: ResourceLike,
        *,
        options: ResourceOptions | None = None,
        config: AdminConfig | None = None,
        actions: Mapping[str, Action] | None = None,
    ) -> None:
        self._resource = resource
        self._config = config if config is not None else get_global_config()
        self._default_actions = actions if actions is not None else DEFAULT_ACTIONS
        self.h = ViewHelpers(self._config)
        self.options = options if options is not None else ResourceOptions()
        self.properties: Mapping[str, PropertyDecorator] = MappingProxyType(
            self.decorate_properties()
        )
        self.actions: Mapping[str, ActionDecorator] = MappingProxyType(self.decorate_actions())

        real = {prop.name() for prop in self._resource.properties()}
        self._synthesized = [name for name in self.properties if name not in real]

        if self._config.log_decorations:
            from sqla_admin_decor._audit import log_resource_decoration

            log_resource_decoration(
                resource_name=self.get_resource_name(),
                properties=list(self.properties),
                synthesized=self._synthesized,
                actions=list(self.actions),
            )

    @property
    def resource(self) -> ResourceLike:
        return self._resource

    @property
    def config(self) -> AdminConfig:
        return self._config

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def decorate_properties(self) -> dict[str, PropertyDecorator]:
        """Decorate every resource property, then every options-only path.

        Real properties keep the adapter's order. Paths that appear only in
        ``options.properties`` are appended as non-sortable virtual
        properties, except dotted paths, which must already exist.
        """
        overrides = self.options.properties
        properties: dict[str, PropertyDecorator] = {}
        for prop in self._resource.properties():
            properties[prop.name()] = PropertyDecorator(prop, overrides.get(prop.name()))

        for key, prop_options in overrides.items():
            if key in properties:
                continue
            if "." in key:
                from sqla_admin_decor._audit import log_dropped_option

                log_dropped_option(
                    resource_name=self.get_resource_name(),
                    key=key,
                    detail="nested path is not a property of the resource; not synthesized",
                )
                continue
            properties[key] = PropertyDecorator(BaseProperty(key, is_sortable=False), prop_options)
        return properties

    def decorate_actions(self) -> dict[str, ActionDecorator]:
        """Merge user action options over the built-in actions.

        Options override built-in actions field by field; option keys that
        name no built-in action define custom actions, appended in
        declaration order.
        """
        actions: dict[str, Action] = {}
        for key, action in self._default_actions.items():
            user_options = self.options.actions.get(key)
            actions[key] = action.merge(user_options) if user_options is not None else action

        for key, user_options in self.options.actions.items():
            if key in actions:
                continue
            if user_options.action_type is None:
                from sqla_admin_decor._audit import log_dropped_option

                log_dropped_option(
                    resource_name=self.get_resource_name(),
                    key=key,
                    detail="custom action has no action_type; defaulting to 'resource'",
                )
            actions[key] = user_options.to_action(key)

        return {
            key: ActionDecorator(
                dataclasses.replace(
                    action,
                    name=action.name or key,
                    label=action.label or key,
                ),
                resource=self._resource,
                h=self.h,
            )
            for key, action in actions.items()
        }

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_resource_name(self) -> str:
        return self.options.name or self._resource.name()

    def get_parent(self) -> dict[str, str]:
        """Return the navigation group as ``{"name", "icon"}``.

        Defaults to the database name with an icon derived from the
        database type.
        """
        parent = self.options.parent
        default_icon = f"icon-{self._resource.database_type() or 'database'}"
        if isinstance(parent, ParentOptions):
            return {"name": parent.name, "icon": parent.icon or default_icon}
        return {"name": parent or self._resource.database_name(), "icon": default_icon}

    def get_property_by_key(self, path: str) -> PropertyDecorator:
        """Return the decorated property stored under ``path``.

        Raises:
            ConfigurationError: If there is no property for ``path``.
        """
        try:
            return self.properties[path]
        except KeyError:
            resource_name = self.get_resource_name()
            raise ConfigurationError(
                f"there is no property by the name of '{path}' in resource {resource_name}",
                _PROPERTIES_DOCS,
                path=path,
                resource_name=resource_name,
            ) from None

    def get_properties(self, where: PropertyPlace, *, limit: int = 0) -> list[PropertyDecorator]:
        """Return the properties shown in the ``where`` context.

        An ordering override in the options (e.g. ``list_properties``) is
        returned exactly as given and ``limit`` is ignored. Otherwise the
        visible properties are sorted by position, keeping declaration
        order for equal positions, and cut to ``limit`` when it is not 0.

        Raises:
            ConfigurationError: If an override names an unknown property.
            ValueError: If ``where`` is not a known context.
        """
        if where not in PROPERTY_PLACES:
            raise ValueError(f"where must be one of {PROPERTY_PLACES!r}, got {where!r}")

        override = self.options.properties_for(where)
        if override:
            return [self.get_property_by_key(path) for path in override]

        properties = sorted(
            (p for p in self.properties.values() if p.is_visible(where)),
            key=lambda p: p.position,
        )
        if limit:
            return properties[:limit]
        return properties

    def get_list_properties(self) -> list[PropertyDecorator]:
        return self.get_properties("list", limit=self._config.max_columns_in_list)

    def resource_actions(self, current_admin: Any = None) -> list[ActionDecorator]:
        """Resource-scoped actions ``current_admin`` can see and run."""
        return [
            action
            for action in self.actions.values()
            if action.is_resource_type()
            and action.is_visible(current_admin)
            and action.is_accessible(current_admin)
        ]

    def record_actions(self, record: RecordLike, current_admin: Any = None) -> list[ActionDecorator]:
        """Record-scoped actions ``current_admin`` can see and run on ``record``."""
        return [
            action
            for action in self.actions.values()
            if action.is_record_type()
            and action.is_visible(current_admin, record)
            and action.is_accessible(current_admin, record)
        ]

    def title_property(self) -> PropertyDecorator:
        """The first property flagged as title, else the first property.

        Raises:
            ConfigurationError: If the resource has no properties at all.
        """
        properties = list(self.properties.values())
        title = next((p for p in properties if p.is_title), None)
        if title is not None:
            return title
        if properties:
            return properties[0]
        resource_name = self.get_resource_name()
        raise ConfigurationError(
            f"resource {resource_name} exposes no properties",
            resource_name=resource_name,
        )

    def title_of(self, record: RecordLike) -> Any:
        """Value of the title property in ``record``."""
        return record.param(self.title_property().name)

    def validate(self) -> None:
        """Resolve every ordering override and the title property now.

        Lets configuration mistakes surface at startup instead of on the
        first request.

        Raises:
            ConfigurationError: On the first unresolvable option.
        """
        self.title_property()
        for where in PROPERTY_PLACES:
            self.get_properties(where)

    def to_json(self, current_admin: Any = None) -> dict[str, Any]:
        """Return the JSON snapshot of the resource for ``current_admin``."""
        resource_id = self._resource.id()
        return {
            "id": resource_id,
            "name": self.get_resource_name(),
            "parent": self.get_parent(),
            "href": self.h.resource_url(resource_id),
            "titleProperty": self.title_property().to_json(),
            "resourceActions": [a.to_json() for a in self.resource_actions(current_admin)],
            "listProperties": [p.to_json() for p in self.get_list_properties()],
            "editProperties": [p.to_json() for p in self.get_properties("edit")],
            "showProperties": [p.to_json() for p in self.get_properties("show")],
            "filterProperties": [p.to_json() for p in self.get_properties("filter")],
        }

    def __repr__(self) -> str:
        return f"ResourceDecorator({self._resource.id()!r})"
