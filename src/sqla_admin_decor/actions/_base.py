"""Action descriptors and the context their rules are evaluated in."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from sqla_admin_decor._types import ACTION_TYPES, ActionType, RecordLike, ResourceLike

if TYPE_CHECKING:
    from sqla_admin_decor._view_helpers import ViewHelpers
    from sqla_admin_decor.decorators._options import ActionOptions

__all__ = ["Action", "ActionContext", "ActionRule"]


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Everything a visibility or access rule may look at.

    Attributes:
        resource: The raw resource the action belongs to.
        action: The action being checked.
        current_admin: The logged in admin, or ``None``.
        record: The record for record-scoped checks, else ``None``.
        h: View helpers for URL building.
    """

    resource: ResourceLike
    action: Action
    current_admin: Any = None
    record: RecordLike | None = None
    h: ViewHelpers | None = None


# A rule is a constant or anything callable with an ActionContext,
# including ActionPredicate.
ActionRule = Union[bool, Callable[[ActionContext], bool]]


@dataclass(frozen=True, slots=True)
class Action:
    """A named operation the admin panel can offer.

    Only metadata lives here; ``handler`` is an opaque reference passed
    through to whatever executes actions.

    Attributes:
        name: Unique action name within a resource.
        action_type: ``"resource"`` or ``"record"``.
        label: Text shown on buttons. Defaults to ``name``.
        icon: Icon class name.
        guard: Confirmation question asked before running the action.
        component: Custom front-end component rendering the action.
        handler: Callable executing the action.
        is_visible: Rule deciding whether the action is shown.
        is_accessible: Rule deciding whether the admin may run it.
    """

    name: str
    action_type: ActionType
    label: str | None = None
    icon: str | None = None
    guard: str | None = None
    component: str | None = None
    handler: Callable[..., Any] | None = None
    is_visible: ActionRule = True
    is_accessible: ActionRule = True

    def __post_init__(self) -> None:
        if self.action_type not in ACTION_TYPES:
            raise ValueError(
                f"action_type must be one of {ACTION_TYPES!r}, got {self.action_type!r}"
            )

    def merge(self, options: ActionOptions) -> Action:
        """Return a new action with the non-None fields of ``options`` applied.

        Example::

            delete = DEFAULT_ACTIONS["delete"].merge(ActionOptions(label="Remove"))
            delete.action_type  # still "record"
        """
        return Action(
            name=options.name if options.name is not None else self.name,
            action_type=(
                options.action_type if options.action_type is not None else self.action_type
            ),
            label=options.label if options.label is not None else self.label,
            icon=options.icon if options.icon is not None else self.icon,
            guard=options.guard if options.guard is not None else self.guard,
            component=options.component if options.component is not None else self.component,
            handler=options.handler if options.handler is not None else self.handler,
            is_visible=options.is_visible if options.is_visible is not None else self.is_visible,
            is_accessible=(
                options.is_accessible if options.is_accessible is not None else self.is_accessible
            ),
        )
