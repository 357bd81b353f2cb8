"""8x8 bitmap font for glyph primitives.

Each glyph is eight row bytes, most significant bit leftmost.
"""
from __future__ import annotations

GLYPH_SIZE = 8

BLANK: tuple[int, ...] = (0x00,) * GLYPH_SIZE

_GLYPHS: dict[str, tuple[int, ...]] = {
    " ": BLANK,
    "!": (0x18, 0x18, 0x18, 0x18, 0x00, 0x18, 0x00, 0x00),
    '"': (0x66, 0x66, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    "#": (0x66, 0xFF, 0x66, 0x66, 0xFF, 0x66, 0x00, 0x00),
    "'": (0x18, 0x18, 0x30, 0x00, 0x00, 0x00, 0x00, 0x00),
    ",": (0x00, 0x00, 0x00, 0x00, 0x18, 0x18, 0x30, 0x00),
    "-": (0x00, 0x00, 0x00, 0x7E, 0x00, 0x00, 0x00, 0x00),
    ".": (0x00, 0x00, 0x00, 0x00, 0x18, 0x18, 0x00, 0x00),
    ":": (0x00, 0x18, 0x18, 0x00, 0x18, 0x18, 0x00, 0x00),
    "?": (0x3C, 0x66, 0x0C, 0x18, 0x00, 0x18, 0x00, 0x00),
    "0": (0x3C, 0x66, 0x6E, 0x76, 0x66, 0x3C, 0x00, 0x00),
    "1": (0x18, 0x38, 0x18, 0x18, 0x18, 0x7E, 0x00, 0x00),
    "2": (0x3C, 0x66, 0x0C, 0x18, 0x30, 0x7E, 0x00, 0x00),
    "3": (0x3C, 0x66, 0x1C, 0x06, 0x66, 0x3C, 0x00, 0x00),
    "4": (0x0C, 0x1C, 0x3C, 0x6C, 0x7E, 0x0C, 0x00, 0x00),
    "5": (0x7E, 0x60, 0x7C, 0x06, 0x66, 0x3C, 0x00, 0x00),
    "6": (0x3C, 0x60, 0x7C, 0x66, 0x66, 0x3C, 0x00, 0x00),
    "7": (0x7E, 0x06, 0x0C, 0x18, 0x30, 0x30, 0x00, 0x00),
    "8": (0x3C, 0x66, 0x3C, 0x66, 0x66, 0x3C, 0x00, 0x00),
    "9": (0x3C, 0x66, 0x66, 0x3E, 0x06, 0x3C, 0x00, 0x00),
    "A": (0x3C, 0x66, 0x66, 0x7E, 0x66, 0x66, 0x66, 0x00),
    "B": (0x7C, 0x66, 0x7C, 0x66, 0x66, 0x7C, 0x00, 0x00),
    "C": (0x3C, 0x66, 0x60, 0x60, 0x66, 0x3C, 0x00, 0x00),
    "D": (0x7C, 0x66, 0x66, 0x66, 0x66, 0x7C, 0x00, 0x00),
    "E": (0x7E, 0x60, 0x7C, 0x60, 0x60, 0x7E, 0x00, 0x00),
    "F": (0x7E, 0x60, 0x7C, 0x60, 0x60, 0x60, 0x00, 0x00),
    "G": (0x3C, 0x66, 0x60, 0x6E, 0x66, 0x3C, 0x00, 0x00),
    "H": (0x66, 0x66, 0x7E, 0x66, 0x66, 0x66, 0x00, 0x00),
    "I": (0x3C, 0x18, 0x18, 0x18, 0x18, 0x3C, 0x00, 0x00),
    "J": (0x1E, 0x0C, 0x0C, 0x6C, 0x6C, 0x38, 0x00, 0x00),
    "K": (0x66, 0x6C, 0x78, 0x78, 0x6C, 0x66, 0x00, 0x00),
    "L": (0x60, 0x60, 0x60, 0x60, 0x60, 0x7E, 0x00, 0x00),
    "M": (0x63, 0x77, 0x7F, 0x6B, 0x63, 0x63, 0x00, 0x00),
    "N": (0x66, 0x76, 0x7E, 0x7E, 0x6E, 0x66, 0x00, 0x00),
    "O": (0x3C, 0x66, 0x66, 0x66, 0x66, 0x3C, 0x00, 0x00),
    "P": (0x7C, 0x66, 0x66, 0x7C, 0x60, 0x60, 0x00, 0x00),
    "Q": (0x3C, 0x66, 0x66, 0x6E, 0x3C, 0x06, 0x00, 0x00),
    "R": (0x7C, 0x66, 0x66, 0x7C, 0x6C, 0x66, 0x00, 0x00),
    "S": (0x3C, 0x60, 0x3C, 0x06, 0x66, 0x3C, 0x00, 0x00),
    "T": (0x7E, 0x18, 0x18, 0x18, 0x18, 0x18, 0x00, 0x00),
    "U": (0x66, 0x66, 0x66, 0x66, 0x66, 0x3C, 0x00, 0x00),
    "V": (0x66, 0x66, 0x66, 0x66, 0x3C, 0x18, 0x00, 0x00),
    "W": (0x63, 0x63, 0x6B, 0x7F, 0x77, 0x63, 0x00, 0x00),
    "X": (0x66, 0x66, 0x3C, 0x3C, 0x66, 0x66, 0x00, 0x00),
    "Y": (0x66, 0x66, 0x3C, 0x18, 0x18, 0x18, 0x00, 0x00),
    "Z": (0x7E, 0x06, 0x1C, 0x38, 0x60, 0x7E, 0x00, 0x00),
}


def supports(char: str) -> bool:
    return char.upper() in _GLYPHS


def glyph_rows(char: str) -> tuple[int, ...]:
    """Rows for ``char``; unsupported characters come back blank."""
    return _GLYPHS.get(char.upper(), BLANK)


def glyph_pixels(char: str) -> list[tuple[int, int]]:
    """(column, row) of every lit pixel in the glyph."""
    lit: list[tuple[int, int]] = []
    for row, bits in enumerate(glyph_rows(char)):
        for col in range(GLYPH_SIZE):
            if bits & (0x80 >> col):
                lit.append((col, row))
    return lit
