"""Layered configuration for sqla-admin-decor."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_MAX_COLUMNS_IN_LIST",
    "AdminConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

# Default maximum number of properties shown as list columns.
DEFAULT_MAX_COLUMNS_IN_LIST = 8


@dataclass(frozen=True, slots=True)
class AdminConfig:
    """Admin-wide settings shared by every decorated resource.

    Attributes:
        root_path: URL prefix the admin panel is mounted under.
        login_path: URL of the login page.
        logout_path: URL of the logout endpoint.
        max_columns_in_list: Cap on list columns when a resource has no
            ``list_properties`` override. ``0`` disables the cap.
        log_decorations: Log a summary of every resource decoration.

    Example::

        config = AdminConfig(root_path="/backoffice")
        merged = config.merge(max_columns_in_list=5)
    """

    root_path: str = "/admin"
    login_path: str = "/admin/login"
    logout_path: str = "/admin/logout"
    max_columns_in_list: int = DEFAULT_MAX_COLUMNS_IN_LIST
    log_decorations: bool = False

    def __post_init__(self) -> None:
        for attr in ("root_path", "login_path", "logout_path"):
            value = getattr(self, attr)
            if not value.startswith("/"):
                raise ValueError(f"{attr} must start with '/', got {value!r}")
        if self.max_columns_in_list < 0:
            raise ValueError(
                f"max_columns_in_list must be zero or positive, got {self.max_columns_in_list!r}"
            )

    def merge(
        self,
        *,
        root_path: str | None = None,
        login_path: str | None = None,
        logout_path: str | None = None,
        max_columns_in_list: int | None = None,
        log_decorations: bool | None = None,
    ) -> AdminConfig:
        """Return a new config with non-None overrides applied.

        Args:
            root_path: Override for root_path (ignored if None).
            login_path: Override for login_path (ignored if None).
            logout_path: Override for logout_path (ignored if None).
            max_columns_in_list: Override for max_columns_in_list (ignored if None).
            log_decorations: Override for log_decorations (ignored if None).

        Returns:
            A new ``AdminConfig`` with overrides merged.
        """
        return AdminConfig(
            root_path=root_path if root_path is not None else self.root_path,
            login_path=login_path if login_path is not None else self.login_path,
            logout_path=logout_path if logout_path is not None else self.logout_path,
            max_columns_in_list=(
                max_columns_in_list
                if max_columns_in_list is not None
                else self.max_columns_in_list
            ),
            log_decorations=(
                log_decorations if log_decorations is not None else self.log_decorations
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AdminConfig()


def get_global_config() -> AdminConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    root_path: str | None = None,
    login_path: str | None = None,
    logout_path: str | None = None,
    max_columns_in_list: int | None = None,
    log_decorations: bool | None = None,
) -> AdminConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.
    Resource decorators read the config once, when they are built, so
    call this before registering resources.

    Example::

        configure(root_path="/backoffice", log_decorations=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        root_path=root_path,
        login_path=login_path,
        logout_path=logout_path,
        max_columns_in_list=max_columns_in_list,
        log_decorations=log_decorations,
    )
    return _global_config


def _set_global_config(cfg: AdminConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AdminConfig()
