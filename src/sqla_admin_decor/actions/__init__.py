"""Actions — built-in action set, descriptors and predicates."""

from sqla_admin_decor.actions._base import Action, ActionContext, ActionRule
from sqla_admin_decor.actions._defaults import DEFAULT_ACTIONS
from sqla_admin_decor.actions._predicate import (
    ActionPredicate,
    always_allow,
    always_deny,
    has_role,
    is_logged_in,
    predicate,
)

__all__ = [
    "DEFAULT_ACTIONS",
    "Action",
    "ActionContext",
    "ActionPredicate",
    "ActionRule",
    "always_allow",
    "always_deny",
    "has_role",
    "is_logged_in",
    "predicate",
]
