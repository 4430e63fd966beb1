from __future__ import annotations

import inspect

from word_exam.styling import ColorPalette, Styles
from word_exam.ui.dialog_helpers import show_info


def test_window_style_uses_palette_colors():
    style = Styles.get_main_window_style()

    assert ColorPalette.BACKGROUND_PRIMARY in style
    assert ColorPalette.TEXT_PRIMARY in style
    assert ColorPalette.BUTTON_HOVER_BG in style


def test_countdown_is_red():
    assert Styles.get_countdown_style().endswith(f"color: {ColorPalette.COUNTDOWN};")


def test_floating_panel_background():
    assert Styles.get_floating_panel_style() == "background-color: #000000;"


def test_info_dialog_takes_only_parent_title_and_message():
    assert list(inspect.signature(show_info).parameters) == ["parent", "title", "message"]
