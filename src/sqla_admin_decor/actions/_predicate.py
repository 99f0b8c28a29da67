"""Composable visibility and access predicates for actions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqla_admin_decor.actions._base import ActionContext

__all__ = [
    "ActionPredicate",
    "always_allow",
    "always_deny",
    "has_role",
    "is_logged_in",
    "predicate",
]


class ActionPredicate:
    """A composable rule deciding whether an action is visible or accessible.

    Wraps a callable that takes an ``ActionContext`` and returns a bool.
    Supports ``&`` (AND), ``|`` (OR), and ``~`` (NOT) composition.

    Example::

        is_admin = has_role("admin")
        is_owner = ActionPredicate(
            lambda ctx: ctx.record is not None
            and ctx.record.param("owner_id") == ctx.current_admin.id
        )

        ActionOptions(is_accessible=is_admin | is_owner)
    """

    def __init__(self, fn: Callable[[ActionContext], bool], *, name: str = "") -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "<anonymous>")

    def __call__(self, context: ActionContext) -> bool:
        return bool(self._fn(context))

    def __and__(self, other: ActionPredicate) -> ActionPredicate:
        def _and(context: ActionContext) -> bool:
            return self(context) and other(context)

        return ActionPredicate(_and, name=f"({self._name} & {other._name})")

    def __or__(self, other: ActionPredicate) -> ActionPredicate:
        def _or(context: ActionContext) -> bool:
            return self(context) or other(context)

        return ActionPredicate(_or, name=f"({self._name} | {other._name})")

    def __invert__(self) -> ActionPredicate:
        def _not(context: ActionContext) -> bool:
            return not self(context)

        return ActionPredicate(_not, name=f"~{self._name}")

    @property
    def name(self) -> str:
        """The human-readable name of this predicate."""
        return self._name

    def __repr__(self) -> str:
        return f"ActionPredicate({self._name!r})"


def predicate(fn: Callable[[ActionContext], bool]) -> ActionPredicate:
    """Decorator/factory that creates an ActionPredicate from a callable.

    Example::

        @predicate
        def is_draft(ctx: ActionContext) -> bool:
            return ctx.record is not None and not ctx.record.param("is_published")
    """
    return ActionPredicate(fn, name=getattr(fn, "__name__", "<lambda>"))


def has_role(*roles: str) -> ActionPredicate:
    """Predicate matching admins whose ``role`` attribute is one of ``roles``."""

    def _has_role(context: ActionContext) -> bool:
        return getattr(context.current_admin, "role", None) in roles

    return ActionPredicate(_has_role, name=f"has_role({', '.join(roles)})")


# Built-in predicates


def _always_allow(context: ActionContext) -> bool:
    return True


def _always_deny(context: ActionContext) -> bool:
    return False


def _is_logged_in(context: ActionContext) -> bool:
    return context.current_admin is not None


always_allow: ActionPredicate = ActionPredicate(_always_allow, name="always_allow")
always_deny: ActionPredicate = ActionPredicate(_always_deny, name="always_deny")
is_logged_in: ActionPredicate = ActionPredicate(_is_logged_in, name="is_logged_in")
