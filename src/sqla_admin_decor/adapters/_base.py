"""Base property, resource and record classes for adapters."""

from __future__ import annotations

import abc
from collections.abc import Mapping, Sequence
from typing import Any

from sqla_admin_decor._types import PropertyLike

__all__ = ["TITLE_COLUMN_NAMES", "BaseProperty", "BaseRecord", "BaseResource"]

# Property names treated as a record's title unless options say otherwise.
TITLE_COLUMN_NAMES: frozenset[str] = frozenset({"title", "name", "subject", "email"})


class BaseProperty:
    """Plain property descriptor.

    Adapters may subclass it or satisfy ``PropertyLike`` on their own.
    Resource decorators use it directly for properties that exist only in
    the options (virtual fields rendered by custom components).

    Example::

        prop = BaseProperty("preview", is_sortable=False)
        prop.is_title()  # False
    """

    def __init__(
        self,
        path: str,
        *,
        type: str = "string",
        is_id: bool = False,
        is_sortable: bool = True,
        is_required: bool = False,
        available_values: Sequence[str] | None = None,
        reference: str | None = None,
    ) -> None:
        self._path = path
        self._type = type
        self._is_id = is_id
        self._is_sortable = is_sortable
        self._is_required = is_required
        self._available_values = list(available_values) if available_values is not None else None
        self._reference = reference

    def name(self) -> str:
        return self._path

    def path(self) -> str:
        return self._path

    def type(self) -> str:
        return self._type

    def is_id(self) -> bool:
        return self._is_id

    def is_title(self) -> bool:
        return self._path.lower() in TITLE_COLUMN_NAMES

    def is_sortable(self) -> bool:
        return self._is_sortable

    def is_visible(self) -> bool:
        return "password" not in self._path.lower()

    def is_editable(self) -> bool:
        return not self._is_id

    def is_required(self) -> bool:
        return self._is_required

    def available_values(self) -> list[str] | None:
        return self._available_values

    def reference(self) -> str | None:
        return self._reference

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r}, type={self._type!r})"


class BaseResource(abc.ABC):
    """Abstract table or collection exposed through an adapter."""

    @abc.abstractmethod
    def id(self) -> str:
        """Stable identifier used in URLs."""

    def name(self) -> str:
        return self.id()

    @abc.abstractmethod
    def database_name(self) -> str: ...

    def database_type(self) -> str | None:
        return None

    @abc.abstractmethod
    def properties(self) -> Sequence[PropertyLike]:
        """All properties, in the order the adapter wants them shown."""

    def find_property(self, path: str) -> PropertyLike | None:
        for prop in self.properties():
            if prop.name() == path:
                return prop
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id()!r})"


class BaseRecord:
    """Record backed by a mapping of params.

    ``param()`` accepts dotted paths and reads nested mappings when the
    flat key is absent.

    Example::

        record = BaseRecord({"id": 1, "author": {"name": "Ann"}})
        record.param("author.name")  # "Ann"
    """

    def __init__(self, params: Mapping[str, Any], *, id_param: str = "id") -> None:
        self._params = dict(params)
        self._id_param = id_param

    def id(self) -> Any:
        return self.param(self._id_param)

    def param(self, path: str) -> Any:
        if path in self._params:
            return self._params[path]
        value: Any = self._params
        for part in path.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return None
            value = value[part]
        return value

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"
