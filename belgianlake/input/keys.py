"""Keyboard mapping from decoded terminal tokens to session key events."""

from __future__ import annotations

from types import MappingProxyType

from .. import controller as ctl
from ..controller import KeyEvent

DEFAULT_KEYMAP = MappingProxyType(
    {
        "q": ctl.QUIT,
        "CTRL_C": ctl.QUIT,
        "UP": ctl.UP,
        "k": ctl.UP,
        "DOWN": ctl.DOWN,
        "j": ctl.DOWN,
        "PAGE_UP": ctl.PAGE_UP,
        "PAGE_DOWN": ctl.PAGE_DOWN,
        "HOME": ctl.HOME,
        "g": ctl.HOME,
        "END": ctl.END,
        "G": ctl.END,
        "SPACE": ctl.SPACE,
        "ENTER_CR": ctl.ENTER,
        "ENTER_LF": ctl.ENTER,
        "v": ctl.MODIFIER,
        "SHIFT_SPACE": ctl.RANGE_SELECT,
        "u": ctl.UNDO,
        "a": ctl.SELECT_ALL,
        "d": ctl.CLEAR_SELECTION,
        "t": ctl.TOGGLE_ALL,
        "e": ctl.ENABLE_DISABLE_ALL,
        "x": ctl.TOGGLE_CURRENT,
    }
)


def key_event_for_token(token: str) -> KeyEvent | None:
    """Translate a ``read_key`` token into a ``KeyEvent``.

    Empty tokens (read timeouts) produce ``None``. Unmapped tokens still
    produce an event so the controller can consume a held range modifier.
    """
    if not token:
        return None
    return KeyEvent(DEFAULT_KEYMAP.get(token, token))
