"""FastAPI dependencies for sqla-admin-decor."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Depends, Request

from sqla_admin_decor.decorators._registry import ResourceRegistry, get_default_registry

__all__ = ["ResourceJSONDep", "get_current_admin"]


def get_current_admin(request: Request) -> Any:
    """Sentinel dependency — override via ``app.dependency_overrides[get_current_admin]``.

    Raises ``NotImplementedError`` if not overridden, so the session
    layer has to be wired in before ``ResourceJSONDep`` is used.

    Example::

        app.dependency_overrides[get_current_admin] = my_current_admin
    """
    raise NotImplementedError(
        "Override get_current_admin via app.dependency_overrides[get_current_admin]."
    )


def _make_dependency(
    resource_id: str | None,
    *,
    id_param: str,
    registry: ResourceRegistry | None,
) -> Callable[..., Any]:
    def _resolve(
        request: Request,
        current_admin: Any = Depends(get_current_admin),  # noqa: B008
    ) -> dict[str, Any]:
        target = registry if registry is not None else get_default_registry()
        effective_id = resource_id if resource_id is not None else request.path_params[id_param]
        return target.lookup(effective_id).to_json(current_admin)

    return _resolve


def ResourceJSONDep(
    resource_id: str | None = None,
    *,
    id_param: str = "resource_id",
    registry: ResourceRegistry | None = None,
) -> Any:
    """FastAPI dependency resolving a resource snapshot for the current admin.

    With ``resource_id`` the snapshot of that resource is returned;
    otherwise the id is read from the ``id_param`` path parameter.
    Unknown ids raise ``UnknownResourceError`` (404 with
    ``install_error_handlers``).

    Example::

        @app.get("/admin/api/resources/{resource_id}")
        def resource(snapshot: dict = ResourceJSONDep()) -> dict:
            return snapshot
    """
    return Depends(_make_dependency(resource_id, id_param=id_param, registry=registry))
