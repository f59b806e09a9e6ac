"""Half-block encoding of a pixel field into terminal cells.

Terminal character cells are roughly twice as tall as they are wide, so
each output cell carries two vertically stacked pixels: a glyph picks
which halves are filled and a color pair supplies the two colors.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from nsnake.pixels import BACKGROUND, Color, PixelField

PALETTE_SIZE = len(Color)
PAIR_COUNT = PALETTE_SIZE * PALETTE_SIZE


class Glyph(enum.Enum):
    """Which halves of an output cell are filled with the foreground."""

    EMPTY = " "
    UPPER = "▀"
    LOWER = "▄"
    FULL = "█"


class RenderCell(NamedTuple):
    glyph: Glyph
    pair: int


def color_pair_index(fg: Color, bg: Color) -> int:
    """Index of the (foreground, background) pair; 0 is left to the terminal."""
    return int(fg) * PALETTE_SIZE + int(bg) + 1


def encode_cell(top: Color, bottom: Color) -> RenderCell:
    """Encode two stacked pixels as one output cell.

    The filled half is always drawn in the pair's foreground, so a lone
    bottom pixel swaps the pair to ``(bottom, top)``.
    """
    top_set = top != BACKGROUND
    bottom_set = bottom != BACKGROUND
    if top_set and bottom_set:
        glyph = Glyph.FULL if top == bottom else Glyph.UPPER
        return RenderCell(glyph, color_pair_index(top, bottom))
    if top_set:
        return RenderCell(Glyph.UPPER, color_pair_index(top, bottom))
    if bottom_set:
        return RenderCell(Glyph.LOWER, color_pair_index(bottom, top))
    return RenderCell(Glyph.EMPTY, color_pair_index(top, bottom))


class HalfBlockRenderer:
    """Converts a :class:`PixelField` into rows of :class:`RenderCell`.

    Output row ``r`` covers field rows ``2r`` and ``2r + 1``. With an odd
    field height the bottom half of the last output row is background.
    """

    def render(self, field: PixelField) -> list[list[RenderCell]]:
        width, height = field.size
        rows: list[list[RenderCell]] = []
        for y in range(0, height, 2):
            row = []
            for x in range(width):
                top = field.get(x, y)
                bottom = field.get(x, y + 1) if y + 1 < height else BACKGROUND
                row.append(encode_cell(top, bottom))
            rows.append(row)
        return rows

    def to_text(self, field: PixelField) -> list[str]:
        """Render glyphs only, one string per output row."""
        return [
            "".join(cell.glyph.value for cell in row)
            for row in self.render(field)
        ]
