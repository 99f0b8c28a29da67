"""sqla-admin-decor testing utilities — MockAdmin, assertions, and fixtures.

- **MockAdmin / factories**: Lightweight current admins for tests.
- **Assertion helpers**: ``assert_property_names``,
  ``assert_actions_available``, ``assert_actions_hidden``.
- **Fixtures**: ``admin_registry``, ``admin_config``, ``isolated_admin_state``.

Example::

    from sqla_admin_decor.testing import assert_actions_hidden, make_viewer

    def test_viewers_cannot_delete(decorator, record):
        assert_actions_hidden(decorator, make_viewer(), ["delete"], record=record)
"""

from sqla_admin_decor.testing._actors import MockAdmin, make_admin, make_editor, make_viewer
from sqla_admin_decor.testing._assertions import (
    assert_actions_available,
    assert_actions_hidden,
    assert_property_names,
)
from sqla_admin_decor.testing._fixtures import admin_config, admin_registry, isolated_admin_state
from sqla_admin_decor.testing._isolation import isolated_admin

__all__ = [
    "MockAdmin",
    "admin_config",
    "admin_registry",
    "assert_actions_available",
    "assert_actions_hidden",
    "assert_property_names",
    "isolated_admin",
    "isolated_admin_state",
    "make_admin",
    "make_editor",
    "make_viewer",
]
