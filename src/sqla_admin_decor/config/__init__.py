"""Configuration module for sqla-admin-decor."""

from __future__ import annotations

from sqla_admin_decor.config._config import (
    DEFAULT_MAX_COLUMNS_IN_LIST,
    AdminConfig,
    configure,
    get_global_config,
)

__all__ = ["DEFAULT_MAX_COLUMNS_IN_LIST", "AdminConfig", "configure", "get_global_config"]
