"""FastAPI integration for sqla-admin-decor."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. "
        "Install it with: pip install sqla-admin-decor[fastapi]"
    ) from exc

from sqla_admin_decor.integrations.fastapi._dependencies import (
    ResourceJSONDep,
    get_current_admin,
)
from sqla_admin_decor.integrations.fastapi._errors import install_error_handlers

__all__ = ["ResourceJSONDep", "get_current_admin", "install_error_handlers"]
