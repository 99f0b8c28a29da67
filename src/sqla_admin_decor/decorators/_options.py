"""Typed user options for resources, properties and actions.

Every field defaults to ``None``, meaning "not specified": decorators
fall back to adapter metadata or built-in defaults for those fields.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeVar

from sqla_admin_decor._types import (
    ACTION_TYPES,
    PROPERTY_PLACES,
    ActionType,
    PropertyPlace,
)
from sqla_admin_decor.actions._base import Action, ActionRule
from sqla_admin_decor.exceptions import ConfigurationError

__all__ = ["ActionOptions", "ParentOptions", "PropertyOptions", "ResourceOptions"]

_OPTIONS_DOCS = "customizing-resources.html"

T = TypeVar("T")


def _check_keys(cls: type, mapping: Mapping[str, Any]) -> None:
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(mapping) - known)
    if unknown:
        raise ConfigurationError(
            f"unknown {cls.__name__} key(s) {unknown!r}, expected some of {sorted(known)!r}",
            _OPTIONS_DOCS,
        )


def _coerce(cls: type[T], value: T | Mapping[str, Any]) -> T:
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        return cls.from_mapping(value)  # type: ignore[attr-defined]
    raise ConfigurationError(
        f"expected {cls.__name__} or a mapping, got {type(value).__name__}",
        _OPTIONS_DOCS,
    )


@dataclass(frozen=True, slots=True)
class PropertyOptions:
    """Overrides for a single property.

    Attributes:
        label: Text shown instead of the humanized property name.
        position: Sort key within a context; lower comes first.
        is_visible: ``True``/``False`` for every context, or a partial
            mapping such as ``{"list": False}``. Contexts missing from
            the mapping keep the property's default visibility.
        is_title: Use this property as the record title.
        is_id: Treat the property as the record id.
        is_sortable: Allow sorting by this property.
        is_disabled: Render the property read-only in forms.
        is_required: Mark the property required in forms.
        type: Override the adapter's property type.
        available_values: Restrict input to these values.
        reference: Id of the resource this property points to.
        components: Custom front-end components keyed by context.
        custom: Free-form data passed through to the front end.

    Example::

        PropertyOptions(is_visible={"list": False}, position=3)
    """

    label: str | None = None
    position: int | None = None
    is_visible: bool | Mapping[PropertyPlace, bool] | None = None
    is_title: bool | None = None
    is_id: bool | None = None
    is_sortable: bool | None = None
    is_disabled: bool | None = None
    is_required: bool | None = None
    type: str | None = None
    available_values: Sequence[str] | None = None
    reference: str | None = None
    components: Mapping[str, str] | None = None
    custom: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.is_visible, Mapping):
            unknown = sorted(set(self.is_visible) - set(PROPERTY_PLACES))
            if unknown:
                raise ConfigurationError(
                    f"is_visible keys must be among {PROPERTY_PLACES!r}, got {unknown!r}",
                    _OPTIONS_DOCS,
                )
            object.__setattr__(self, "is_visible", MappingProxyType(dict(self.is_visible)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> PropertyOptions:
        _check_keys(cls, mapping)
        return cls(**mapping)


@dataclass(frozen=True, slots=True)
class ActionOptions:
    """Overrides for a built-in action, or the definition of a custom one.

    Only the fields that are set replace the built-in ones, so
    ``ActionOptions(label="Remove")`` on ``delete`` keeps its scope,
    guard and rules.

    Example::

        ResourceOptions(actions={
            "delete": ActionOptions(is_accessible=has_role("admin")),
            "publish": ActionOptions(action_type="record", handler=publish_post),
        })
    """

    name: str | None = None
    action_type: ActionType | None = None
    label: str | None = None
    icon: str | None = None
    guard: str | None = None
    component: str | None = None
    handler: Callable[..., Any] | None = None
    is_visible: ActionRule | None = None
    is_accessible: ActionRule | None = None

    def __post_init__(self) -> None:
        if self.action_type is not None and self.action_type not in ACTION_TYPES:
            raise ConfigurationError(
                f"action_type must be one of {ACTION_TYPES!r}, got {self.action_type!r}",
                _OPTIONS_DOCS,
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ActionOptions:
        _check_keys(cls, mapping)
        return cls(**mapping)

    def to_action(self, key: str, *, default_type: ActionType = "resource") -> Action:
        """Build a custom action named ``key`` from these options alone."""
        base = Action(name=key, action_type=default_type)
        return base.merge(self)


@dataclass(frozen=True, slots=True)
class ParentOptions:
    """Navigation group a resource is listed under."""

    name: str
    icon: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ParentOptions:
        _check_keys(cls, mapping)
        if "name" not in mapping:
            raise ConfigurationError("parent options require a 'name'", _OPTIONS_DOCS)
        return cls(**mapping)


@dataclass(frozen=True, slots=True)
class ResourceOptions:
    """User customization of one resource.

    Plain mappings are accepted for ``parent``, ``properties`` values and
    ``actions`` values and converted on construction.

    Attributes:
        name: Display name replacing the adapter's resource name.
        parent: Navigation group, as a name or ``ParentOptions``.
        properties: Per-property overrides keyed by property path. Keys
            that are not real properties (and contain no ``.``) become
            virtual properties.
        list_properties: Exact properties, in order, for the list view.
        show_properties: Exact properties, in order, for the show view.
        edit_properties: Exact properties, in order, for the edit form.
        filter_properties: Exact properties, in order, for the filter.
        actions: Per-action overrides keyed by action name. Unknown names
            define custom actions.

    Example::

        ResourceOptions(
            parent="Blog",
            list_properties=["title", "is_published"],
            properties={"body": {"is_visible": {"list": False}}},
        )
    """

    name: str | None = None
    parent: str | ParentOptions | None = None
    properties: Mapping[str, PropertyOptions] = field(default_factory=dict)
    list_properties: Sequence[str] | None = None
    show_properties: Sequence[str] | None = None
    edit_properties: Sequence[str] | None = None
    filter_properties: Sequence[str] | None = None
    actions: Mapping[str, ActionOptions] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.parent, Mapping):
            object.__setattr__(self, "parent", ParentOptions.from_mapping(self.parent))
        properties = {
            key: _coerce(PropertyOptions, value) for key, value in (self.properties or {}).items()
        }
        object.__setattr__(self, "properties", MappingProxyType(properties))
        actions = {key: _coerce(ActionOptions, value) for key, value in (self.actions or {}).items()}
        object.__setattr__(self, "actions", MappingProxyType(actions))
        for place in PROPERTY_PLACES:
            attr = f"{place}_properties"
            value = getattr(self, attr)
            if isinstance(value, str):
                raise ConfigurationError(
                    f"{attr} must be a sequence of property paths, not a string",
                    _OPTIONS_DOCS,
                )
            if value is not None:
                object.__setattr__(self, attr, tuple(value))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ResourceOptions:
        """Build options from a plain mapping, e.g. a parsed config file."""
        _check_keys(cls, mapping)
        return cls(**mapping)

    def properties_for(self, where: PropertyPlace) -> Sequence[str] | None:
        """The ordering override for ``where``, or ``None`` when unset or empty."""
        value: Sequence[str] | None = getattr(self, f"{where}_properties")
        return value or None
