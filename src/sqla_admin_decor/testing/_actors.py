"""MockAdmin and factory functions for testing admin configurations."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MockAdmin", "make_admin", "make_editor", "make_viewer"]


@dataclass(frozen=True, slots=True)
class MockAdmin:
    """Test admin that satisfies the ``CurrentAdminLike`` protocol.

    Carries a ``role`` so rules built with ``has_role`` can be exercised.

    Example::

        admin = MockAdmin(id=1, role="admin")
        assert isinstance(admin, CurrentAdminLike)
    """

    id: int | str
    email: str = "admin@example.com"
    role: str = "viewer"


def make_admin(id: int | str = 1) -> MockAdmin:
    """Create a ``MockAdmin`` with ``role="admin"``."""
    return MockAdmin(id=id, role="admin")


def make_editor(id: int | str = 2) -> MockAdmin:
    """Create a ``MockAdmin`` with ``role="editor"``."""
    return MockAdmin(id=id, email="editor@example.com", role="editor")


def make_viewer(id: int | str = 3) -> MockAdmin:
    """Create a ``MockAdmin`` with ``role="viewer"``."""
    return MockAdmin(id=id, email="viewer@example.com", role="viewer")
