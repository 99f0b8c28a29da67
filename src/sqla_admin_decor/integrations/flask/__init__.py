"""Flask integration for sqla-admin-decor."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install sqla-admin-decor[flask]"
    ) from exc

from sqla_admin_decor.integrations.flask._extension import AdminDecorExtension

__all__ = ["AdminDecorExtension"]
