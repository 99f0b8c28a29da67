"""Optional web framework integrations for sqla-admin-decor."""
