"""SQLAlchemy adapter — resources and records from mapped models."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Column, ColumnElement, Engine, inspect as sa_inspect, types as sa_types
from sqlalchemy.orm import ColumnProperty, DeclarativeBase

from sqla_admin_decor.adapters._base import BaseProperty, BaseResource

__all__ = ["SQLAlchemyProperty", "SQLAlchemyRecord", "SQLAlchemyResource"]

# Checked in order; subclasses (e.g. DateTime before Date) come first.
_TYPE_MAP: tuple[tuple[type[sa_types.TypeEngine[Any]], str], ...] = (
    (sa_types.Boolean, "boolean"),
    (sa_types.DateTime, "datetime"),
    (sa_types.Date, "date"),
    (sa_types.Float, "float"),
    (sa_types.Numeric, "float"),
    (sa_types.Integer, "number"),
    (sa_types.Text, "textarea"),
    (sa_types.Enum, "string"),
    (sa_types.String, "string"),
    (sa_types.JSON, "mixed"),
)


def _property_type(column: ColumnElement[Any]) -> str:
    if isinstance(column, Column) and column.foreign_keys:
        return "reference"
    for sa_type, name in _TYPE_MAP:
        if isinstance(column.type, sa_type):
            return name
    return "string"


class SQLAlchemyProperty(BaseProperty):
    """Property built from a mapped column attribute.

    SQL expression attributes (``column_property(first + " " + last)``) are
    read-only: never ids, never required, without a reference and not
    editable.

    Example::

        mapper = sa_inspect(Post)
        prop = SQLAlchemyProperty(mapper.column_attrs["author_id"])
        prop.reference()  # "users"
    """

    def __init__(self, column_attr: ColumnProperty[Any]) -> None:
        column = column_attr.columns[0]
        available_values = None
        if isinstance(column.type, sa_types.Enum):
            available_values = list(column.type.enums)
        if not isinstance(column, Column):
            super().__init__(
                column_attr.key,
                type=_property_type(column),
                available_values=available_values,
            )
            self._column: ColumnElement[Any] = column
            self._is_expression = True
            return

        reference = None
        if column.foreign_keys:
            reference = next(iter(column.foreign_keys)).column.table.name
        super().__init__(
            column_attr.key,
            type=_property_type(column),
            is_id=bool(column.primary_key),
            is_sortable=True,
            is_required=(
                not column.nullable
                and not column.primary_key
                and column.default is None
                and column.server_default is None
            ),
            available_values=available_values,
            reference=reference,
        )
        self._column = column
        self._is_expression = False

    def is_editable(self) -> bool:
        return not self._is_expression and super().is_editable()

    @property
    def is_expression(self) -> bool:
        """True for SQL expression attributes, which map to no table column."""
        return self._is_expression

    @property
    def column(self) -> ColumnElement[Any]:
        return self._column


class SQLAlchemyResource(BaseResource):
    """Resource backed by a SQLAlchemy declarative model.

    The resource id is the table name and the name is the model class
    name. When an ``engine`` is given its database and dialect name are
    used as the database name and type.

    Example::

        resource = SQLAlchemyResource(Post, engine=engine)
        [p.name() for p in resource.properties()]
        # ["id", "title", "is_published", "author_id"]
    """

    def __init__(self, model: type[DeclarativeBase], *, engine: Engine | None = None) -> None:
        self._model = model
        self._mapper = sa_inspect(model)
        self._engine = engine
        self._properties = [SQLAlchemyProperty(attr) for attr in self._mapper.column_attrs]

    @property
    def model(self) -> type[DeclarativeBase]:
        return self._model

    def id(self) -> str:
        return self._mapper.local_table.name  # type: ignore[union-attr]

    def name(self) -> str:
        return self._model.__name__

    def database_name(self) -> str:
        if self._engine is not None and self._engine.url.database:
            return self._engine.url.database
        schema = getattr(self._mapper.local_table, "schema", None)
        return schema or "default"

    def database_type(self) -> str | None:
        if self._engine is None:
            return None
        return self._engine.dialect.name

    def properties(self) -> list[SQLAlchemyProperty]:
        return list(self._properties)

    def build_record(self, instance: Any) -> SQLAlchemyRecord:
        return SQLAlchemyRecord(instance)


class SQLAlchemyRecord:
    """Record wrapping a mapped model instance.

    Dotted paths are followed through relationships; a missing link
    anywhere on the path yields ``None``.

    Example::

        record = SQLAlchemyRecord(post)
        record.param("author.name")  # "Alice"
    """

    def __init__(self, instance: Any) -> None:
        self._instance = instance

    @property
    def instance(self) -> Any:
        return self._instance

    def id(self) -> Any:
        identity = sa_inspect(self._instance).identity
        if identity is None:
            return None
        return identity[0] if len(identity) == 1 else identity

    def param(self, path: str) -> Any:
        value = self._instance
        for part in path.split("."):
            if value is None:
                return None
            value = getattr(value, part, None)
        return value

    def __repr__(self) -> str:
        return f"SQLAlchemyRecord({self._instance!r})"
