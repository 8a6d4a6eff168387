"""Global key dispatch tests.

Exercises selection movement, detail scrolling, focus keys, query clearing,
and the fatal path for rows that no longer point into the catalog.
"""

from __future__ import annotations

import unittest

from helpers import sample_catalog

from spellbrowser.errors import SelectionReferenceError
from spellbrowser.focus import Focus
from spellbrowser.runtime.session import Session
from spellbrowser.search.filtering import VisibleRow


class InputDispatcherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = Session()
        self.session.set_catalog(sample_catalog())
        self.state = self.session.state
        self.dispatcher = self.session.dispatcher

    def _type(self, text: str) -> None:
        for ch in text:
            self.state.query_input.handle_key(self.dispatcher.handle_key(ch))

    def test_every_key_is_returned_for_widget_handling(self) -> None:
        for key in ("ENTER", "UP", "DOWN", "CTRL_D", "LEFT", "RIGHT", "TAB", "x", "F5"):
            self.assertEqual(self.dispatcher.handle_key(key), key)

    def test_any_key_clears_status_text(self) -> None:
        self.session.set_status("Loaded 3 spells")
        self.dispatcher.handle_key("x")
        self.assertEqual(self.state.status_bar.text, "")

    def test_enter_pushes_selected_spell_without_changing_focus(self) -> None:
        self.dispatcher.handle_key("DOWN")
        self.dispatcher.handle_key("ENTER")
        self.assertEqual(self.state.detail_pane.spell, sample_catalog()[1])
        self.assertIs(self.state.focus, Focus.LIST)

    def test_enter_resolves_source_index_under_filter(self) -> None:
        self._type("storm")
        self.dispatcher.handle_key("ENTER")
        self.assertEqual(self.state.detail_pane.spell.name, "Ice Storm")

    def test_enter_on_empty_rows_is_noop(self) -> None:
        self._type("zzz")
        self.assertEqual(self.state.list_pane.item_count, 0)
        self.dispatcher.handle_key("ENTER")
        self.assertIsNone(self.state.detail_pane.spell)

    def test_enter_on_empty_catalog_is_noop(self) -> None:
        session = Session()
        self.assertEqual(session.dispatcher.handle_key("ENTER"), "ENTER")
        self.assertIsNone(session.state.detail_pane.spell)

    def test_down_from_last_row_wraps_to_first(self) -> None:
        self.state.list_pane.current_index = 2
        self.dispatcher.handle_key("DOWN")
        self.assertEqual(self.state.list_pane.current_index, 0)

    def test_down_and_ctrl_j_advance_selection(self) -> None:
        self.dispatcher.handle_key("DOWN")
        self.dispatcher.handle_key("CTRL_J")
        self.assertEqual(self.state.list_pane.current_index, 2)

    def test_up_from_first_row_stays_at_first_row(self) -> None:
        self.dispatcher.handle_key("UP")
        self.dispatcher.handle_key("CTRL_K")
        self.assertEqual(self.state.list_pane.current_index, 0)

    def test_up_moves_selection_back(self) -> None:
        self.state.list_pane.current_index = 2
        self.dispatcher.handle_key("CTRL_K")
        self.assertEqual(self.state.list_pane.current_index, 1)

    def test_navigation_scrolls_detail_when_detail_focused(self) -> None:
        self.dispatcher.handle_key("ENTER")
        self.state.detail_pane.set_content_height(total_lines=10, visible_rows=3)
        self.dispatcher.handle_key("RIGHT")
        self.dispatcher.handle_key("DOWN")
        self.dispatcher.handle_key("CTRL_J")
        self.assertEqual(self.state.detail_pane.start, 2)
        self.dispatcher.handle_key("UP")
        self.assertEqual(self.state.detail_pane.start, 1)
        self.assertEqual(self.state.list_pane.current_index, 0)

    def test_ctrl_d_clears_query_and_recomputes(self) -> None:
        self._type("fire")
        self.assertEqual(self.state.list_pane.item_count, 2)
        self.dispatcher.handle_key("CTRL_D")
        self.assertEqual(self.state.query, "")
        self.assertEqual(self.state.query_input.text, "")
        self.assertEqual(self.state.list_pane.item_count, 3)

    def test_focus_keys(self) -> None:
        self.dispatcher.handle_key("CTRL_L")
        self.assertIs(self.state.focus, Focus.DETAIL)
        self.dispatcher.handle_key("CTRL_H")
        self.assertIs(self.state.focus, Focus.LIST)
        self.dispatcher.handle_key("RIGHT")
        self.assertIs(self.state.focus, Focus.DETAIL)
        self.dispatcher.handle_key("LEFT")
        self.assertIs(self.state.focus, Focus.LIST)
        self.dispatcher.handle_key("TAB")
        self.assertIs(self.state.focus, Focus.DETAIL)
        self.dispatcher.handle_key("TAB")
        self.assertIs(self.state.focus, Focus.LIST)

    def test_typing_while_detail_focused_returns_focus_to_list(self) -> None:
        self.dispatcher.handle_key("TAB")
        self._type("f")
        self.assertIs(self.state.focus, Focus.LIST)
        self.assertEqual(self.state.query, "f")

    def test_selection_resets_when_filter_shrinks_past_it(self) -> None:
        self.state.list_pane.current_index = 2
        self._type("fire")
        self.assertEqual(self.state.list_pane.current_index, 0)

    def test_selection_kept_when_still_in_range(self) -> None:
        self.state.list_pane.current_index = 1
        self._type("fire")
        self.assertEqual(self.state.list_pane.current_index, 1)

    def test_row_pointing_outside_catalog_is_fatal(self) -> None:
        self.state.list_pane.set_rows([VisibleRow(label="ghost", source_index=7)])
        with self.assertRaises(SelectionReferenceError) as ctx:
            self.dispatcher.handle_key("ENTER")
        self.assertEqual(ctx.exception.source_index, 7)
        self.assertEqual(ctx.exception.catalog_size, 3)


if __name__ == "__main__":
    unittest.main()
