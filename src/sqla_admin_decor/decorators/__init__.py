"""Decorators — presentation models of resources, properties and actions."""

from sqla_admin_decor.decorators._action import ActionDecorator
from sqla_admin_decor.decorators._options import (
    ActionOptions,
    ParentOptions,
    PropertyOptions,
    ResourceOptions,
)
from sqla_admin_decor.decorators._property import (
    DEFAULT_PROPERTY_POSITION,
    PropertyDecorator,
    humanize,
)
from sqla_admin_decor.decorators._registry import ResourceRegistry, get_default_registry
from sqla_admin_decor.decorators._resource import ResourceDecorator

__all__ = [
    "DEFAULT_PROPERTY_POSITION",
    "ActionDecorator",
    "ActionOptions",
    "ParentOptions",
    "PropertyDecorator",
    "PropertyOptions",
    "ResourceDecorator",
    "ResourceOptions",
    "ResourceRegistry",
    "get_default_registry",
    "humanize",
]
