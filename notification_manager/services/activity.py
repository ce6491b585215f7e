"""
Activity state machine for applications, events and notification types.

States: ACTIVE, INACTIVE, DELETED (terminal).

    INACTIVE --activate--> ACTIVE
    ACTIVE --deactivate--> INACTIVE
    ACTIVE | INACTIVE --delete--> DELETED
    DELETED --delete--> DELETED (no-op)

Deleting a parent cascades ``delete`` to its direct children; the cascade
itself is run by the entity services with bulk updates.
"""

from ..models import ActivityState
from .errors import InvalidTransitionError


def initial_state(is_active: bool | None = None) -> ActivityState:
    """State for a newly created entity. Inactive unless asked otherwise."""
    return ActivityState.ACTIVE if is_active else ActivityState.INACTIVE


def activate(state: ActivityState) -> ActivityState:
    if state == ActivityState.DELETED:
        raise InvalidTransitionError("A deleted entity cannot be activated.")
    return ActivityState.ACTIVE


def deactivate(state: ActivityState) -> ActivityState:
    if state == ActivityState.DELETED:
        return state
    return ActivityState.INACTIVE


def delete(state: ActivityState) -> ActivityState:
    return ActivityState.DELETED


def apply_flags(
    state: ActivityState,
    is_active: bool | None = None,
    is_deleted: bool | None = None,
) -> ActivityState:
    """Translate the ``is_active`` / ``is_deleted`` patch fields into a transition.

    ``is_deleted=False`` is not a transition and leaves the state alone.
    """
    if is_deleted:
        return delete(state)
    if is_active is True:
        return activate(state)
    if is_active is False:
        return deactivate(state)
    return state


def is_live(state: ActivityState | None) -> bool:
    """True when an entity may own new children or produce messages."""
    return state == ActivityState.ACTIVE
