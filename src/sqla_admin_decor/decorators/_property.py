"""PropertyDecorator — a property descriptor with user overrides resolved."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqla_admin_decor._types import PROPERTY_PLACES, PropertyLike, PropertyPlace
from sqla_admin_decor.decorators._options import PropertyOptions

__all__ = ["DEFAULT_PROPERTY_POSITION", "PropertyDecorator", "humanize"]

# Position of properties that are neither the title nor an id.
DEFAULT_PROPERTY_POSITION = 100


def humanize(path: str) -> str:
    """Turn a property path into a label: ``author.first_name`` -> ``Author first name``."""
    words = path.replace(".", " ").replace("_", " ").split()
    if not words:
        return path
    text = " ".join(words).lower()
    return text[0].upper() + text[1:]


class PropertyDecorator:
    """Wraps one property and resolves how it is presented.

    Every attribute first looks at the user's ``PropertyOptions`` and
    falls back to what the adapter reports.

    Example::

        decorator = PropertyDecorator(BaseProperty("title"))
        decorator.is_title   # True
        decorator.position   # -1
        decorator.is_visible("list")  # True
    """

    def __init__(self, descriptor: PropertyLike, options: PropertyOptions | None = None) -> None:
        self._property = descriptor
        self._options = options if options is not None else PropertyOptions()

    @property
    def descriptor(self) -> PropertyLike:
        """The wrapped adapter property."""
        return self._property

    @property
    def options(self) -> PropertyOptions:
        return self._options

    @property
    def name(self) -> str:
        return self._property.name()

    @property
    def label(self) -> str:
        if self._options.label is not None:
            return self._options.label
        return humanize(self.name)

    @property
    def type(self) -> str:
        if self._options.type is not None:
            return self._options.type
        return self._property.type()

    @property
    def is_title(self) -> bool:
        if self._options.is_title is not None:
            return self._options.is_title
        return self._property.is_title()

    @property
    def is_id(self) -> bool:
        if self._options.is_id is not None:
            return self._options.is_id
        return self._property.is_id()

    @property
    def is_sortable(self) -> bool:
        if self._options.is_sortable is not None:
            return self._options.is_sortable
        return self._property.is_sortable()

    @property
    def is_required(self) -> bool:
        if self._options.is_required is not None:
            return self._options.is_required
        return self._property.is_required()

    @property
    def is_disabled(self) -> bool:
        return bool(self._options.is_disabled)

    @property
    def available_values(self) -> list[str] | None:
        values = self._options.available_values
        if values is None:
            values = self._property.available_values()
        return list(values) if values is not None else None

    @property
    def reference(self) -> str | None:
        if self._options.reference is not None:
            return self._options.reference
        return self._property.reference()

    @property
    def position(self) -> int:
        """Sort key within a context.

        Defaults to ``-1`` for the title, ``0`` for ids and
        ``DEFAULT_PROPERTY_POSITION`` for everything else.
        """
        if self._options.position is not None:
            return self._options.position
        if self.is_title:
            return -1
        if self.is_id:
            return 0
        return DEFAULT_PROPERTY_POSITION

    def is_visible(self, where: PropertyPlace) -> bool:
        """Whether the property is shown in the ``where`` context."""
        if where not in PROPERTY_PLACES:
            raise ValueError(f"where must be one of {PROPERTY_PLACES!r}, got {where!r}")
        rule = self._options.is_visible
        if isinstance(rule, Mapping):
            if where in rule:
                return bool(rule[where])
        elif rule is not None:
            return bool(rule)
        if not self._property.is_visible():
            return False
        if where == "edit":
            return self._property.is_editable()
        return True

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "isTitle": self.is_title,
            "isId": self.is_id,
            "position": self.position,
            "isSortable": self.is_sortable,
            "isRequired": self.is_required,
            "isDisabled": self.is_disabled,
            "availableValues": self.available_values,
            "name": self.name,
            "label": self.label,
            "type": self.type,
            "reference": self.reference,
            "components": dict(self._options.components) if self._options.components else None,
            "custom": dict(self._options.custom) if self._options.custom else {},
        }

    def __repr__(self) -> str:
        return f"PropertyDecorator({self.name!r})"
