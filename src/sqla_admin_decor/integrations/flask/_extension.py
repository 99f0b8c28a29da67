"""Flask extension for sqla-admin-decor."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import Flask, current_app, jsonify

from sqla_admin_decor.decorators._registry import ResourceRegistry, get_default_registry
from sqla_admin_decor.exceptions import ConfigurationError, UnknownResourceError

__all__ = ["AdminDecorExtension"]


class AdminDecorExtension:
    """Flask extension exposing resource snapshots for the current admin.

    Registers error handlers for sqla-admin-decor exceptions and provides
    ``resource_json()`` for views. Supports the app-factory pattern via
    ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        current_admin_provider: A callable ``() -> admin`` returning the
            logged in admin (or ``None``). Called within request context.
        registry: Optional resource registry. Defaults to the global one.

    Example::

        app = Flask(__name__)
        admin = AdminDecorExtension(app, current_admin_provider=lambda: g.admin)

        @app.get("/admin/api/resources/<resource_id>")
        def resource(resource_id):
            return admin.resource_json(resource_id)
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        current_admin_provider: Callable[[], Any],
        registry: ResourceRegistry | None = None,
    ) -> None:
        self._current_admin_provider = current_admin_provider
        self._registry = registry

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Store state on ``app.extensions["sqla_admin_decor"]`` and register error handlers."""
        app.extensions["sqla_admin_decor"] = {
            "current_admin_provider": self._current_admin_provider,
            "registry": self._registry,
        }

        @app.errorhandler(UnknownResourceError)
        def handle_unknown_resource(exc: UnknownResourceError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 404

        @app.errorhandler(ConfigurationError)
        def handle_configuration_error(exc: ConfigurationError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 500

    def _registry_for_app(self) -> ResourceRegistry:
        ext_state: dict[str, Any] = current_app.extensions["sqla_admin_decor"]
        registry: ResourceRegistry | None = ext_state["registry"]
        return registry if registry is not None else get_default_registry()

    def resource_json(self, resource_id: str) -> dict[str, Any]:
        """Snapshot of ``resource_id`` for the current admin.

        Must be called within a Flask request context.
        """
        ext_state: dict[str, Any] = current_app.extensions["sqla_admin_decor"]
        current_admin = ext_state["current_admin_provider"]()
        return self._registry_for_app().lookup(resource_id).to_json(current_admin)

    def resources_json(self) -> list[dict[str, Any]]:
        """Snapshots of every registered resource for the current admin."""
        ext_state: dict[str, Any] = current_app.extensions["sqla_admin_decor"]
        current_admin = ext_state["current_admin_provider"]()
        return self._registry_for_app().to_json(current_admin)
