"""ActionDecorator — an action bound to its resource."""

from __future__ import annotations

from typing import Any

from sqla_admin_decor._types import ActionType, RecordLike, ResourceLike
from sqla_admin_decor._view_helpers import ViewHelpers
from sqla_admin_decor.actions._base import Action, ActionContext, ActionRule

__all__ = ["ActionDecorator"]


class ActionDecorator:
    """Wraps one action with the resource it belongs to.

    Answers whether the action is visible and accessible for a given
    admin (and record) and exposes the action's JSON metadata. Unset
    rules count as ``True``; callable rules get an ``ActionContext``.

    Example::

        decorator = ActionDecorator(DEFAULT_ACTIONS["delete"], resource=resource)
        decorator.is_record_type()        # True
        decorator.is_accessible(admin, record)
    """

    def __init__(
        self,
        action: Action,
        *,
        resource: ResourceLike,
        h: ViewHelpers | None = None,
    ) -> None:
        self._action = action
        self._resource = resource
        self._h = h if h is not None else ViewHelpers()

    @property
    def action(self) -> Action:
        return self._action

    @property
    def name(self) -> str:
        return self._action.name

    @property
    def label(self) -> str:
        return self._action.label or self._action.name

    @property
    def action_type(self) -> ActionType:
        return self._action.action_type

    def is_resource_type(self) -> bool:
        return self._action.action_type == "resource"

    def is_record_type(self) -> bool:
        return self._action.action_type == "record"

    def is_visible(self, current_admin: Any = None, record: RecordLike | None = None) -> bool:
        return self._check(self._action.is_visible, current_admin, record)

    def is_accessible(self, current_admin: Any = None, record: RecordLike | None = None) -> bool:
        return self._check(self._action.is_accessible, current_admin, record)

    def _check(self, rule: ActionRule, current_admin: Any, record: RecordLike | None) -> bool:
        if callable(rule):
            context = ActionContext(
                resource=self._resource,
                action=self._action,
                current_admin=current_admin,
                record=record,
                h=self._h,
            )
            return bool(rule(context))
        return bool(rule)

    def has_component(self) -> bool:
        return self._action.component is not None

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "actionType": self.action_type,
            "icon": self._action.icon,
            "label": self.label,
            "guard": self._action.guard,
            "component": self._action.component,
        }

    def __repr__(self) -> str:
        return f"ActionDecorator({self.name!r}, action_type={self.action_type!r})"
