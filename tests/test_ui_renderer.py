"""
Tests for gridmenu.ui.renderer.

Covers:
- cutoff_text / justify_text width arithmetic
- LayoutConfig normalisation
- build_frame output for bordered, compact and empty grids
- render_menu_screen writing through a sink
"""

import pytest

from gridmenu.menu.model import MenuState, Option
from gridmenu.ui.colors import ColorScheme, Palette
from gridmenu.ui.renderer import (
    CURSOR_HOME,
    Alignment,
    LayoutConfig,
    build_frame,
    cutoff_text,
    effective_columns,
    justify_text,
    option_label,
    render_menu_screen,
    row_width,
)
from gridmenu.ui.terminal import BufferTerminal


def make_state(texts, selected=0, colors=None, **kwargs):
    return MenuState(
        options=[Option(text) for text in texts],
        selected=selected,
        colors=colors or ColorScheme(highlight_foreground=Palette.NONE),
        **kwargs,
    )


class TestCutoffText:
    def test_short_text_unchanged(self):
        assert cutoff_text("abc", 5) == "abc"

    def test_exact_fit_unchanged(self):
        assert cutoff_text("abcde", 5) == "abcde"

    def test_long_text_gets_ellipsis(self):
        assert cutoff_text("abcdefgh", 6) == "abc..."

    def test_width_three_is_all_ellipsis(self):
        assert cutoff_text("abcdef", 3) == "..."

    @pytest.mark.parametrize("width", [0, 1, 2])
    def test_narrow_width_plain_truncation(self, width):
        assert cutoff_text("abcdef", width) == "abcdef"[:width]


class TestJustifyText:
    def test_left_pads_right(self):
        assert justify_text("ab", 5, Alignment.LEFT) == "ab   "

    def test_right_pads_left(self):
        assert justify_text("ab", 5, Alignment.RIGHT) == "   ab"

    def test_center_extra_space_goes_right(self):
        assert justify_text("ab", 5, Alignment.CENTER) == " ab  "

    def test_center_even_padding(self):
        assert justify_text("ab", 6, Alignment.CENTER) == "  ab  "

    @pytest.mark.parametrize("text", ["", "a", "hello", "hello world", "   x"])
    @pytest.mark.parametrize("width", [11, 12, 20])
    def test_left_justify_then_rstrip_round_trips(self, text, width):
        assert justify_text(text, width, Alignment.LEFT).rstrip(" ") == text

    @pytest.mark.parametrize("alignment", list(Alignment))
    @pytest.mark.parametrize("width", [3, 4, 7, 10])
    def test_long_text_is_exactly_width_with_ellipsis(self, alignment, width):
        result = justify_text("x" * 25, width, alignment)
        assert len(result) == width
        assert result.endswith("...")

    @pytest.mark.parametrize("width", [1, 2])
    def test_long_text_narrow_width(self, width):
        result = justify_text("abcdef", width, Alignment.CENTER)
        assert result == "abcdef"[:width]

    def test_width_measured_in_code_points(self):
        assert justify_text("é", 3, Alignment.LEFT) == "é  "


class TestLayoutConfig:
    def test_zero_columns_normalised_to_one(self):
        assert LayoutConfig(max_columns=0).max_columns == 1

    def test_set_max_columns_normalises(self):
        config = LayoutConfig(max_columns=4)
        config.set_max_columns(0)
        assert config.max_columns == 1

    @pytest.mark.parametrize("separator", [None, "", "\0"])
    def test_no_row_separator_sentinels(self, separator):
        config = LayoutConfig(row_separator=separator, cell_width=5)
        assert config.row_separator is None
        assert config.draws_row_separators is False

    @pytest.mark.parametrize("separator", ["--", "=="])
    def test_multi_character_row_separator_rejected(self, separator):
        with pytest.raises(ValueError, match="Row separator"):
            LayoutConfig(row_separator=separator)
        with pytest.raises(ValueError, match="Row separator"):
            LayoutConfig().set_row_separator(separator)

    @pytest.mark.parametrize("separator", ["", "||", None])
    def test_column_separator_must_be_one_character(self, separator):
        with pytest.raises(ValueError, match="Column separator"):
            LayoutConfig(column_separator=separator)
        with pytest.raises(ValueError, match="Column separator"):
            LayoutConfig().set_column_separator(separator)

    def test_rejected_separator_leaves_config_unchanged(self):
        config = LayoutConfig(column_separator="!", row_separator="=")
        with pytest.raises(ValueError):
            config.set_row_separator("==")
        assert config.row_separator == "="
        assert config.column_separator == "!"

    def test_compact_mode_never_draws_row_separators(self):
        assert LayoutConfig(cell_width=0, row_separator="=").draws_row_separators is False

    @pytest.mark.parametrize(
        "value, expected",
        [("left", Alignment.LEFT), ("CENTER", Alignment.CENTER), (1, Alignment.RIGHT)],
    )
    def test_alignment_parsing(self, value, expected):
        assert LayoutConfig(alignment=value).alignment is expected

    def test_effective_columns(self):
        assert effective_columns(3, 7) == 3
        assert effective_columns(5, 2) == 2
        assert effective_columns(3, 0) == 1

    def test_row_width(self):
        assert row_width(LayoutConfig(cell_width=4), 3) == 16


class TestOptionLabel:
    def test_index_prefix(self):
        config = LayoutConfig(show_index=True)
        assert option_label(3, "Quit", config) == "[3] Quit"

    def test_index_prefix_counts_toward_width(self):
        config = LayoutConfig(show_index=True, cell_width=8)
        assert option_label(0, "Quit now", config) == "[0] Q..."


class TestBuildFrame:
    def test_starts_at_cursor_home(self):
        writes = build_frame(make_state(["A"]), LayoutConfig())
        assert writes[0] == CURSOR_HOME

    def test_bordered_grid_with_short_last_row(self, frame_text):
        config = LayoutConfig(max_columns=3, cell_width=4, auto_width=False)
        state = make_state(["A", "BB", "CCC", "DDDD"])

        assert frame_text(build_frame(state, config)) == (
            "----------------\n"
            "|A   |BB  |CCC |\n"
            "|----|----|----|\n"
            "|DDDD|    |    |\n"
            "----------------\n"
            "\n"
        )

    def test_full_last_row(self, frame_text):
        config = LayoutConfig(max_columns=2, cell_width=3)
        state = make_state(["a", "b", "c", "d"])

        assert frame_text(build_frame(state, config)) == (
            "---------\n"
            "|a  |b  |\n"
            "|---|---|\n"
            "|c  |d  |\n"
            "---------\n"
            "\n"
        )

    def test_truncation_inside_cells(self, frame_text):
        config = LayoutConfig(max_columns=1, cell_width=6, alignment=Alignment.RIGHT)
        state = make_state(["Short", "Much too long"])

        assert frame_text(build_frame(state, config)) == (
            "--------\n"
            "| Short|\n"
            "|------|\n"
            "|Muc...|\n"
            "--------\n"
            "\n"
        )

    def test_no_row_separator(self, frame_text):
        config = LayoutConfig(max_columns=2, cell_width=3, row_separator=None)
        state = make_state(["a", "b", "c"])

        assert frame_text(build_frame(state, config)) == "|a  |b  |\n|c  |\n\n"

    def test_compact_mode(self, frame_text):
        config = LayoutConfig(max_columns=2, cell_width=0)
        state = make_state(["A", "BB", "CCC"])

        assert frame_text(build_frame(state, config)) == "|A|BB|\n|CCC|\n\n"

    def test_custom_separators(self, frame_text):
        config = LayoutConfig(
            max_columns=2, cell_width=2, column_separator="!", row_separator="="
        )
        state = make_state(["a", "b", "c"])

        assert frame_text(build_frame(state, config)) == (
            "=======\n"
            "!a !b !\n"
            "!==!==!\n"
            "!c !  !\n"
            "=======\n"
            "\n"
        )

    def test_top_and_bottom_text(self, frame_text):
        config = LayoutConfig(cell_width=0)
        state = make_state(["A"], top_text="Title", bottom_text="Help")

        assert frame_text(build_frame(state, config)) == "Title\n\n|A|\n\nHelp\n\n"

    def test_empty_menu_renders_header_and_footer_only(self, frame_text):
        config = LayoutConfig(cell_width=10)
        state = make_state([], top_text="Title", bottom_text="Help")

        assert frame_text(build_frame(state, config)) == "Title\n\n\nHelp\n\n"

    def test_empty_menu_without_texts(self):
        assert build_frame(make_state([]), LayoutConfig()) == [CURSOR_HOME, "\n"]

    def test_selected_option_uses_highlight_colors(self):
        state = make_state(["A", "B"], selected=1, colors=ColorScheme())
        writes = build_frame(state, LayoutConfig(max_columns=2, cell_width=0))

        assert "A" in writes
        assert "\x1b[32mB\x1b[0m" in writes

    def test_normal_colors_applied_to_other_options(self):
        colors = ColorScheme(
            foreground=Palette.WHITE, highlight_foreground=Palette.NONE
        )
        state = make_state(["A", "B"], selected=0, colors=colors)
        writes = build_frame(state, LayoutConfig(max_columns=2, cell_width=0))

        assert "A" in writes
        assert "\x1b[37mB\x1b[0m" in writes

    def test_show_index(self, frame_text):
        config = LayoutConfig(max_columns=2, cell_width=0, show_index=True)
        state = make_state(["A", "B"])

        assert frame_text(build_frame(state, config)) == "|[0] A|[1] B|\n\n"

    def test_frame_is_pure(self):
        config = LayoutConfig(max_columns=3, cell_width=5)
        state = make_state(["A", "B", "C", "D"], selected=2, top_text="T")
        assert build_frame(state, config) == build_frame(state, config)
        assert config.cell_width == 5


class TestRenderMenuScreen:
    def test_writes_every_frame_piece(self):
        sink = BufferTerminal()
        config = LayoutConfig(max_columns=2, cell_width=3)
        state = make_state(["a", "b", "c"])

        render_menu_screen(sink, state, config)

        assert sink.output == build_frame(state, config)
        assert sink.clear_count == 0
