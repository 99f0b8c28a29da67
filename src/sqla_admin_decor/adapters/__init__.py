"""Adapters — property, resource and record descriptors."""

from sqla_admin_decor.adapters._base import (
    TITLE_COLUMN_NAMES,
    BaseProperty,
    BaseRecord,
    BaseResource,
)
from sqla_admin_decor.adapters._sqlalchemy import (
    SQLAlchemyProperty,
    SQLAlchemyRecord,
    SQLAlchemyResource,
)

__all__ = [
    "TITLE_COLUMN_NAMES",
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
    "SQLAlchemyProperty",
    "SQLAlchemyRecord",
    "SQLAlchemyResource",
]
