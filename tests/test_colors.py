from utils.colors import PALETTE, color_for


def test_palette_is_large_and_distinct():
    assert len(PALETTE) >= 30
    assert len(set(PALETTE)) == len(PALETTE)


def test_color_for_wraps():
    assert color_for(0) == PALETTE[0]
    assert color_for(len(PALETTE)) == PALETTE[0]
    assert color_for(len(PALETTE) + 3) == PALETTE[3]

