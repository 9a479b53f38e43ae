import pytest

from termpic.dimensions import target_size


def test_width_is_requested_columns():
    assert target_size(640, 480, 100)[0] == 100


def test_height_corrects_for_cell_aspect():
    # 80 * 7/8 / 2 = 35 glyph rows for a square image
    assert target_size(100, 100) == (80, 70)


def test_height_rounds_to_even():
    # 50 * 10 * 0.875 / 100 = 4.375 -> half 2.1875 -> 2 -> 4
    assert target_size(100, 50, 10) == (10, 4)


def test_tiny_image_single_cell():
    assert target_size(1, 2, 1) == (1, 2)


def test_degenerate_height_is_one_glyph_row():
    assert target_size(1000, 1, 80) == (80, 2)


@pytest.mark.parametrize(
    "w,h,width",
    [(1, 1, 1), (3, 7, 5), (1920, 1080, 80), (10, 1000, 3), (1000, 3, 200), (17, 31, 80)],
)
def test_height_always_even_and_at_least_two(w, h, width):
    _, height = target_size(w, h, width)
    assert height % 2 == 0
    assert height >= 2


@pytest.mark.parametrize("w,h,width", [(0, 10, 80), (10, 0, 80), (10, 10, 0), (10, 10, -5)])
def test_rejects_non_positive(w, h, width):
    with pytest.raises(ValueError):
        target_size(w, h, width)
