"""Shared protocols and type aliases for sqla-admin-decor."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, Protocol, runtime_checkable

__all__ = [
    "ACTION_TYPES",
    "PROPERTY_PLACES",
    "ActionType",
    "CurrentAdminLike",
    "PropertyLike",
    "PropertyPlace",
    "RecordLike",
    "ResourceLike",
]

# UI surfaces a property can be shown on.
PropertyPlace = Literal["list", "show", "edit", "filter"]

PROPERTY_PLACES: tuple[PropertyPlace, ...] = ("list", "show", "edit", "filter")

# Whether an action applies to a whole resource or to a single record.
ActionType = Literal["resource", "record"]

ACTION_TYPES: tuple[ActionType, ...] = ("resource", "record")


@runtime_checkable
class CurrentAdminLike(Protocol):
    """Structural type for the currently logged in admin.

    Any object with an ``id`` attribute satisfies this protocol.
    The session layer decides what else it carries (email, role...).

    Example::

        @dataclass
        class Admin:
            id: int
            email: str

        assert isinstance(Admin(id=1, email="a@b.c"), CurrentAdminLike)
    """

    @property
    def id(self) -> int | str: ...


@runtime_checkable
class PropertyLike(Protocol):
    """Adapter-provided description of a single field of a resource."""

    def name(self) -> str: ...

    def type(self) -> str: ...

    def is_id(self) -> bool: ...

    def is_title(self) -> bool: ...

    def is_sortable(self) -> bool: ...

    def is_visible(self) -> bool: ...

    def is_editable(self) -> bool: ...

    def is_required(self) -> bool: ...

    def available_values(self) -> Sequence[str] | None: ...

    def reference(self) -> str | None: ...


@runtime_checkable
class ResourceLike(Protocol):
    """Adapter-provided table or collection exposed to the admin."""

    def id(self) -> str: ...

    def name(self) -> str: ...

    def database_name(self) -> str: ...

    def database_type(self) -> str | None: ...

    def properties(self) -> Sequence[PropertyLike]: ...


@runtime_checkable
class RecordLike(Protocol):
    """A single row of a resource."""

    def id(self) -> Any: ...

    def param(self, path: str) -> Any: ...
