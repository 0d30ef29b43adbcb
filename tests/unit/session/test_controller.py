"""Event interpretation: key-to-action mapping, range modifier, and quit state.

Includes the end-to-end editing scenarios for the three-record store.
"""

from __future__ import annotations

import unittest

from belgianlake import controller as ctl
from belgianlake.controller import KeyEvent, ResizeEvent, handle_event
from belgianlake.session.state import SessionState
from belgianlake.store import Record


def _scenario_state() -> SessionState:
    return SessionState(
        records=(
            Record(enabled=False, path="a"),
            Record(enabled=False, path="b"),
            Record(enabled=True, path="c"),
        )
    )


def _press(state: SessionState, *names: str) -> list:
    saves = []
    for name in names:
        transition = handle_event(state, KeyEvent(name))
        state = transition.state
        if transition.save is not None:
            saves.append(transition.save)
    return saves


class ScenarioTests(unittest.TestCase):
    def test_select_two_rows_then_toggle_selected(self) -> None:
        """Enter flips each selected row, so the already-enabled ``c`` ends up disabled."""
        state = _scenario_state()
        # Space on row 0 advances to row 1; move to row 2 and select it.
        saves = _press(state, ctl.SPACE, ctl.DOWN, ctl.SPACE)
        self.assertEqual(state.selection, {0, 2})
        self.assertEqual(saves, [])

        saves = _press(state, ctl.ENTER)

        expected = (Record(True, "a"), Record(False, "b"), Record(False, "c"))
        self.assertEqual(state.records, expected)
        self.assertEqual(state.selection, set())
        self.assertEqual(saves, [expected])

    def test_undo_restores_pre_toggle_records_and_clears_selection(self) -> None:
        state = _scenario_state()
        _press(state, ctl.SPACE, ctl.DOWN, ctl.SPACE, ctl.ENTER)
        _press(state, ctl.SPACE)
        self.assertEqual(len(state.selection), 1)

        saves = _press(state, ctl.UNDO)

        expected = (Record(False, "a"), Record(False, "b"), Record(True, "c"))
        self.assertEqual(state.records, expected)
        self.assertEqual(state.selection, set())
        self.assertEqual(saves, [expected])

    def test_empty_store_toggle_all_and_select_all_are_noops(self) -> None:
        state = SessionState(records=())
        saves = _press(
            state,
            ctl.TOGGLE_ALL,
            ctl.SELECT_ALL,
            ctl.ENABLE_DISABLE_ALL,
            ctl.TOGGLE_CURRENT,
            ctl.SPACE,
            ctl.ENTER,
            ctl.DOWN,
            ctl.UNDO,
        )
        self.assertEqual(saves, [])
        self.assertEqual(state.records, ())
        self.assertEqual(state.selection, set())
        self.assertEqual(state.cursor, 0)


class RangeModifierTests(unittest.TestCase):
    def _five(self) -> SessionState:
        return SessionState(records=tuple(Record(False, str(index)) for index in range(5)))

    def test_modifier_space_selects_from_anchor_to_cursor(self) -> None:
        state = self._five()
        _press(state, ctl.SPACE)  # selects 0, anchor 0, cursor 1
        _press(state, ctl.DOWN, ctl.DOWN)  # cursor 3
        _press(state, ctl.MODIFIER, ctl.SPACE)

        self.assertEqual(state.selection, {0, 1, 2, 3})
        self.assertEqual(state.cursor, 3)
        self.assertEqual(state.anchor, 3)
        self.assertFalse(state.range_modifier_held)

    def test_range_without_anchor_selects_only_cursor_row(self) -> None:
        state = self._five()
        state.cursor = 2
        _press(state, ctl.RANGE_SELECT)
        self.assertEqual(state.selection, {2})

    def test_modifier_is_consumed_by_next_key_even_if_unrelated(self) -> None:
        state = self._five()
        _press(state, ctl.MODIFIER)
        self.assertTrue(state.range_modifier_held)
        _press(state, ctl.DOWN)
        self.assertFalse(state.range_modifier_held)

        _press(state, ctl.SPACE)
        self.assertEqual(state.selection, {1})
        self.assertEqual(state.cursor, 2)

    def test_unbound_keys_also_consume_modifier(self) -> None:
        state = self._five()
        _press(state, ctl.MODIFIER, "z")
        self.assertFalse(state.range_modifier_held)

    def test_resize_does_not_consume_modifier(self) -> None:
        state = self._five()
        _press(state, ctl.MODIFIER)
        handle_event(state, ResizeEvent(100, 40))
        self.assertTrue(state.range_modifier_held)
        self.assertEqual((state.width, state.height), (100, 40))


class CursorMovementTests(unittest.TestCase):
    def test_movement_is_clamped(self) -> None:
        state = SessionState(records=tuple(Record(False, str(index)) for index in range(30)), height=17)
        _press(state, ctl.UP)
        self.assertEqual(state.cursor, 0)
        _press(state, ctl.PAGE_DOWN)
        self.assertEqual(state.cursor, ctl.page_rows(state))
        _press(state, ctl.END)
        self.assertEqual(state.cursor, 29)
        _press(state, ctl.DOWN, ctl.PAGE_DOWN)
        self.assertEqual(state.cursor, 29)
        _press(state, ctl.HOME)
        self.assertEqual(state.cursor, 0)

    def test_space_advances_and_wraps(self) -> None:
        state = SessionState(records=(Record(False, "a"), Record(False, "b")), cursor=1)
        _press(state, ctl.SPACE)
        self.assertEqual(state.cursor, 0)
        self.assertEqual(state.selection, {1})


class QuitTests(unittest.TestCase):
    def test_quit_is_terminal_and_blocks_later_mutations(self) -> None:
        state = _scenario_state()
        transition = handle_event(state, KeyEvent(ctl.QUIT))
        self.assertTrue(transition.quit)
        self.assertTrue(state.quitting)

        later = handle_event(state, KeyEvent(ctl.TOGGLE_ALL))
        self.assertTrue(later.quit)
        self.assertIsNone(later.save)
        self.assertEqual(state.records, _scenario_state().records)


if __name__ == "__main__":
    unittest.main()
