"""sqla-admin-decor — presentation models for auto-generated admin panels.

Turns adapter resources (e.g. SQLAlchemy models) plus declarative user
options into render-ready, JSON-serializable descriptions of properties
and actions.

Example::

    from sqla_admin_decor import ResourceDecorator, ResourceOptions, SQLAlchemyResource

    decorator = ResourceDecorator(
        SQLAlchemyResource(Post),
        options=ResourceOptions(parent="Blog", list_properties=["title", "is_published"]),
    )
    snapshot = decorator.to_json(current_admin)
"""

from importlib.metadata import PackageNotFoundError, version

from sqla_admin_decor._types import CurrentAdminLike, PropertyLike, RecordLike, ResourceLike
from sqla_admin_decor.actions import DEFAULT_ACTIONS, Action, ActionPredicate, predicate
from sqla_admin_decor.adapters import (
    BaseProperty,
    BaseRecord,
    BaseResource,
    SQLAlchemyRecord,
    SQLAlchemyResource,
)
from sqla_admin_decor.config._config import (
    DEFAULT_MAX_COLUMNS_IN_LIST,
    AdminConfig,
    configure,
)
from sqla_admin_decor.decorators import (
    ActionDecorator,
    ActionOptions,
    ParentOptions,
    PropertyDecorator,
    PropertyOptions,
    ResourceDecorator,
    ResourceOptions,
    ResourceRegistry,
)
from sqla_admin_decor.exceptions import (
    AdminDecorError,
    ConfigurationError,
    UnknownResourceError,
)

try:
    __version__ = version("sqla-admin-decor")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "DEFAULT_ACTIONS",
    "DEFAULT_MAX_COLUMNS_IN_LIST",
    "Action",
    "ActionDecorator",
    "ActionOptions",
    "ActionPredicate",
    "AdminConfig",
    "AdminDecorError",
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
    "ConfigurationError",
    "CurrentAdminLike",
    "ParentOptions",
    "PropertyDecorator",
    "PropertyLike",
    "PropertyOptions",
    "RecordLike",
    "ResourceDecorator",
    "ResourceLike",
    "ResourceOptions",
    "ResourceRegistry",
    "SQLAlchemyRecord",
    "SQLAlchemyResource",
    "UnknownResourceError",
    "configure",
    "predicate",
]
