"""Event interpretation for the editing session.

``handle_event`` takes the session state and one input event, applies exactly
one action, and returns a ``Transition`` describing the updated state, the
records to persist (if any), and whether the session is quitting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .session import operations
from .session.operations import NOOP, OperationResult
from .session.selection import select_range, toggle_at
from .session.state import SessionState
from .store.types import Records

logger = logging.getLogger(__name__)

QUIT = "quit"
UP = "up"
DOWN = "down"
PAGE_UP = "page_up"
PAGE_DOWN = "page_down"
HOME = "home"
END = "end"
SPACE = "space"
ENTER = "enter"
MODIFIER = "modifier"
RANGE_SELECT = "range_select"
UNDO = "undo"
SELECT_ALL = "select_all"
CLEAR_SELECTION = "clear_selection"
TOGGLE_ALL = "toggle_all"
ENABLE_DISABLE_ALL = "enable_disable_all"
TOGGLE_CURRENT = "toggle_current"

# Rows taken by the frame around the list: top border, header, header rule,
# bottom border, two help lines, and the status line.
LIST_CHROME_ROWS = 7


@dataclass(frozen=True)
class KeyEvent:
    name: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = KeyEvent | ResizeEvent


@dataclass(frozen=True)
class Transition:
    """Result of handling one event."""

    state: SessionState
    save: Records | None = None
    quit: bool = False
    message: str = ""


def page_rows(state: SessionState) -> int:
    """Number of list rows visible in the current viewport."""
    return max(1, state.height - LIST_CHROME_ROWS)


def _move_cursor(state: SessionState, delta: int) -> OperationResult:
    if not state.count:
        return NOOP
    target = max(0, min(state.count - 1, state.cursor + delta))
    if target == state.cursor:
        return NOOP
    state.cursor = target
    state.dirty = True
    return OperationResult(changed=True)


def _jump_cursor(state: SessionState, target: int) -> OperationResult:
    return _move_cursor(state, target - state.cursor)


def _space(state: SessionState, range_held: bool) -> OperationResult:
    """Extend the selection to the cursor, or toggle the cursor row and advance."""
    if not state.count:
        return NOOP
    cursor = state.cursor
    if range_held:
        state.selection = select_range(state.selection, state.anchor, cursor, state.count)
    else:
        state.selection = toggle_at(state.selection, cursor, state.count)
        state.cursor = (cursor + 1) % state.count
    state.anchor = cursor
    state.dirty = True
    return OperationResult(changed=True)


# Handlers receive the state and whether the range modifier was armed.
ACTIONS: Mapping[str, Callable[[SessionState, bool], OperationResult]] = MappingProxyType(
    {
        UP: lambda state, _held: _move_cursor(state, -1),
        DOWN: lambda state, _held: _move_cursor(state, 1),
        PAGE_UP: lambda state, _held: _move_cursor(state, -page_rows(state)),
        PAGE_DOWN: lambda state, _held: _move_cursor(state, page_rows(state)),
        HOME: lambda state, _held: _jump_cursor(state, 0),
        END: lambda state, _held: _jump_cursor(state, state.count - 1),
        SPACE: _space,
        RANGE_SELECT: lambda state, _held: _space(state, True),
        ENTER: lambda state, _held: operations.toggle_selected(state),
        UNDO: lambda state, _held: operations.undo(state),
        TOGGLE_ALL: lambda state, _held: operations.toggle_all(state),
        SELECT_ALL: lambda state, _held: operations.select_all(state),
        CLEAR_SELECTION: lambda state, _held: operations.clear_selection(state),
        ENABLE_DISABLE_ALL: lambda state, _held: operations.enable_or_disable_all(state),
        TOGGLE_CURRENT: lambda state, _held: operations.toggle_current(state),
    }
)


def handle_event(state: SessionState, event: Event) -> Transition:
    """Apply one input event to ``state`` and return the resulting transition."""
    if state.quitting:
        return Transition(state=state, quit=True)

    if isinstance(event, ResizeEvent):
        width = max(1, event.width)
        height = max(1, event.height)
        if (width, height) != (state.width, state.height):
            state.width = width
            state.height = height
            state.dirty = True
        return Transition(state=state)

    if event.name == QUIT:
        state.quitting = True
        state.range_modifier_held = False
        state.dirty = True
        logger.debug("quit requested")
        return Transition(state=state, quit=True)

    if event.name == MODIFIER:
        state.range_modifier_held = True
        state.dirty = True
        return Transition(state=state)

    range_held = state.range_modifier_held
    state.range_modifier_held = False
    if range_held:
        state.dirty = True
    state.clamp()

    action = ACTIONS.get(event.name)
    if action is None:
        logger.debug("ignoring unbound key %r", event.name)
        return Transition(state=state)
    result = action(state, range_held)
    state.clamp()
    if result.save is not None:
        logger.debug("%s changed records; requesting save", event.name)
    return Transition(state=state, save=result.save, message=result.message)
