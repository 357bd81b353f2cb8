from scene.font import BLANK, GLYPH_SIZE, glyph_pixels, glyph_rows, supports


def test_alphabet_and_punctuation_supported():
    for char in "ABCDEFGHIJKLMNOPQRSTUVWXYZ !\"#":
        assert supports(char), char


def test_lowercase_folds_to_uppercase():
    assert supports("a")
    assert glyph_rows("a") == glyph_rows("A")


def test_unknown_character_is_blank():
    assert not supports("@")
    assert glyph_rows("@") == BLANK
    assert glyph_pixels("@") == []


def test_space_has_no_pixels():
    assert glyph_pixels(" ") == []


def test_every_glyph_is_eight_rows():
    for char in "AZ09!":
        assert len(glyph_rows(char)) == GLYPH_SIZE


def test_pixels_read_msb_leftmost():
    # Hyphen is a single bar 0x7E on row 3.
    assert glyph_pixels("-") == [(col, 3) for col in range(1, 7)]


def test_pixels_stay_inside_cell():
    for col, row in glyph_pixels("W"):
        assert 0 <= col < GLYPH_SIZE
        assert 0 <= row < GLYPH_SIZE
