"""Built-in actions every resource gets."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from sqla_admin_decor.actions._base import Action

__all__ = ["DEFAULT_ACTIONS"]

DEFAULT_ACTIONS: Mapping[str, Action] = MappingProxyType(
    {
        "new": Action(name="new", action_type="resource", label="Create new", icon="icon-add"),
        "list": Action(name="list", action_type="resource", label="List", icon="icon-list"),
        "search": Action(
            name="search",
            action_type="resource",
            label="Search",
            icon="icon-search",
            is_visible=False,
        ),
        "show": Action(name="show", action_type="record", label="Show", icon="icon-info"),
        "edit": Action(name="edit", action_type="record", label="Edit", icon="icon-edit"),
        "delete": Action(
            name="delete",
            action_type="record",
            label="Delete",
            icon="icon-remove",
            guard="Do you really want to delete this record?",
        ),
    }
)
