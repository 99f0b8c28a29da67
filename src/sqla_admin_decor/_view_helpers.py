"""URL building for the admin panel."""

from __future__ import annotations

from sqla_admin_decor.config._config import AdminConfig, get_global_config

__all__ = ["ViewHelpers"]


class ViewHelpers:
    """Builds admin URLs relative to ``AdminConfig.root_path``.

    Example::

        h = ViewHelpers(AdminConfig(root_path="/admin"))
        h.resource_action_url("posts", "list")
        # "/admin/resources/posts/actions/list"
    """

    def __init__(self, config: AdminConfig | None = None) -> None:
        self._config = config if config is not None else get_global_config()

    def url_builder(self, *paths: object) -> str:
        """Join ``paths`` under the root path without doubling slashes."""
        root = self._config.root_path.rstrip("/")
        parts = [str(p).strip("/") for p in paths]
        return "/".join([root, *parts]) or "/"

    def dashboard_url(self) -> str:
        return self.url_builder()

    def login_url(self) -> str:
        return self._config.login_path

    def logout_url(self) -> str:
        return self._config.logout_path

    def resource_action_url(self, resource_id: str, action_name: str) -> str:
        return self.url_builder("resources", resource_id, "actions", action_name)

    def record_action_url(self, resource_id: str, record_id: object, action_name: str) -> str:
        return self.url_builder("resources", resource_id, "records", record_id, action_name)

    def resource_url(self, resource_id: str) -> str:
        """URL of the resource's list view."""
        return self.resource_action_url(resource_id, "list")
