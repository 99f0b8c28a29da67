"""Audit logging for resource decoration."""

from __future__ import annotations

import logging
from collections.abc import Sequence

__all__ = ["log_dropped_option", "log_resource_decoration"]

logger = logging.getLogger("sqla_admin_decor")


def log_resource_decoration(
    *,
    resource_name: str,
    properties: Sequence[str],
    synthesized: Sequence[str],
    actions: Sequence[str],
) -> None:
    """Log the outcome of decorating one resource.

    Logging levels:
    - INFO: Summary (resource, property and action counts)
    - DEBUG: Detailed (property names, synthesized paths, action names)

    Example::

        log_resource_decoration(
            resource_name="Post",
            properties=["id", "title"],
            synthesized=["preview"],
            actions=["new", "list", "show"],
        )
    """
    logger.info(
        "Resource decorated: %s — %d property(ies) (%d synthesized), %d action(s)",
        resource_name,
        len(properties),
        len(synthesized),
        len(actions),
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resource %s: properties=%s synthesized=%s actions=%s",
            resource_name,
            list(properties),
            list(synthesized),
            list(actions),
        )


def log_dropped_option(*, resource_name: str, key: str, detail: str) -> None:
    """Log an option that was ignored or defaulted.

    Goes to the ``sqla_admin_decor.options`` sub-logger so operators can
    silence it separately from the decoration summaries.
    """
    options_logger = logging.getLogger("sqla_admin_decor.options")
    options_logger.warning("OPTION resource=%s key=%r — %s", resource_name, key, detail)
