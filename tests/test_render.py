"""Tests for the half-block renderer."""

import pytest

from nsnake.pixels import BACKGROUND, Color, PixelField
from nsnake.render import (
    PAIR_COUNT,
    Glyph,
    HalfBlockRenderer,
    RenderCell,
    color_pair_index,
    encode_cell,
)


class TestColorPairIndex:
    def test_indices_are_unique_and_skip_zero(self):
        indices = {color_pair_index(fg, bg) for fg in Color for bg in Color}
        assert len(indices) == PAIR_COUNT == 64
        assert min(indices) == 1
        assert max(indices) == 64

    def test_order_matters(self):
        assert color_pair_index(Color.RED, Color.BLUE) != color_pair_index(Color.BLUE, Color.RED)


class TestEncodeCell:
    def test_both_background(self):
        assert encode_cell(BACKGROUND, BACKGROUND) == RenderCell(
            Glyph.EMPTY, color_pair_index(BACKGROUND, BACKGROUND),
        )

    def test_top_only(self):
        assert encode_cell(Color.WHITE, BACKGROUND) == RenderCell(
            Glyph.UPPER, color_pair_index(Color.WHITE, BACKGROUND),
        )

    def test_bottom_only_uses_bottom_as_foreground(self):
        assert encode_cell(BACKGROUND, Color.YELLOW) == RenderCell(
            Glyph.LOWER, color_pair_index(Color.YELLOW, BACKGROUND),
        )

    def test_same_color_fills(self):
        assert encode_cell(Color.WHITE, Color.WHITE) == RenderCell(
            Glyph.FULL, color_pair_index(Color.WHITE, Color.WHITE),
        )

    def test_two_colors_split(self):
        assert encode_cell(Color.YELLOW, Color.WHITE) == RenderCell(
            Glyph.UPPER, color_pair_index(Color.YELLOW, Color.WHITE),
        )


class TestHalfBlockRenderer:
    def test_output_rows_round_up(self):
        renderer = HalfBlockRenderer()
        assert len(renderer.render(PixelField((4, 4)))) == 2
        assert len(renderer.render(PixelField((4, 5)))) == 3

    def test_uniform_band_renders_full(self):
        field = PixelField((4, 2))
        field.clear(Color.GREEN)
        rows = HalfBlockRenderer().render(field)
        assert len(rows) == 1
        assert rows[0] == [RenderCell(Glyph.FULL, color_pair_index(Color.GREEN, Color.GREEN))] * 4

    def test_background_band_renders_empty(self):
        rows = HalfBlockRenderer().render(PixelField((3, 2)))
        assert rows == [[RenderCell(Glyph.EMPTY, color_pair_index(BACKGROUND, BACKGROUND))] * 3]

    def test_odd_height_pads_with_background(self):
        field = PixelField((2, 3))
        field.clear(Color.WHITE)
        rows = HalfBlockRenderer().render(field)
        assert [cell.glyph for cell in rows[0]] == [Glyph.FULL, Glyph.FULL]
        assert rows[1] == [RenderCell(Glyph.UPPER, color_pair_index(Color.WHITE, BACKGROUND))] * 2

    @pytest.mark.parametrize(
        ("top", "bottom", "char"),
        [
            (False, False, " "),
            (True, False, "▀"),
            (False, True, "▄"),
            (True, True, "█"),
        ],
    )
    def test_to_text(self, top, bottom, char):
        field = PixelField((1, 2))
        if top:
            field.set(0, 0, Color.WHITE)
        if bottom:
            field.set(0, 1, Color.WHITE)
        assert HalfBlockRenderer().to_text(field) == [char]
