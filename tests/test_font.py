import pytest

from visflowkit.font import CharPosition, FontLayout, load_positions

POSITIONS = "A 0 0 10 20\nB 10 0 15 18 \n  15 0 20 10\njunk line\n\n"


@pytest.fixture
def pos_file(tmp_path):
    path = tmp_path / "font.pos"
    path.write_text(POSITIONS, encoding="latin-1")
    return path


@pytest.fixture
def layout(pos_file):
    return FontLayout(load_positions(pos_file))


def test_load_positions_parses_glyphs(pos_file):
    positions = load_positions(pos_file)
    assert [p.char for p in positions] == ["A", "B", " "]
    assert positions[0].top_left == (0, 0)
    assert positions[0].bottom_right == (10, 20)
    assert positions[2].top_left == (15, 0)
    assert positions[2].bottom_right == (20, 10)


def test_load_positions_missing_file_is_empty(tmp_path):
    assert load_positions(tmp_path / "absent.pos") == []


def test_load_positions_rejects_bad_number(tmp_path):
    path = tmp_path / "bad.pos"
    path.write_text("A x 0 10 20\n", encoding="latin-1")
    with pytest.raises(ValueError):
        load_positions(path)


def test_find_known_and_unknown(layout):
    assert layout.find("B").char == "B"
    assert layout.find("Z") == layout.positions[0]


def test_find_on_empty_layout_raises():
    with pytest.raises(LookupError):
        FontLayout().find("A")


def test_text_size(layout):
    a, b = layout.find("A"), layout.find("B")
    assert layout.text_size("AB") == (a.width + b.width, max(a.height, b.height))
    assert layout.text_size("") == (0, 0)


def test_char_scales(layout):
    scales = layout.char_scales()
    assert scales["A"] == (1.0, 1.0)
    assert scales["B"] == pytest.approx((5 / 10, 18 / 20))
    assert all(0 < w <= 1 and 0 < h <= 1 for w, h in scales.values())


def test_engine_size_uses_relative_widths(layout):
    scales = layout.char_scales()
    expected = 0.5 * (scales["A"][0] + scales["B"][0]) / 2.0
    width, height = layout.engine_size("AB", 2.0, 0.5)
    assert width == pytest.approx(expected)
    assert height == 0.5


def test_engine_size_fixed_width(layout):
    scales = layout.char_scales()
    width, height = layout.engine_size_fixed_width("A", 2.0, 0.4)
    assert width == 0.4
    assert height == pytest.approx(0.4 * 2.0 / scales["A"][0])


def test_missing_char_without_underscore_raises(layout):
    with pytest.raises(KeyError):
        layout.engine_size("Q", 1.0, 1.0)


def test_all_chars_sorted(layout):
    assert layout.all_chars() == " AB"


def test_char_position_rejects_inverted_corners():
    with pytest.raises(ValueError):
        CharPosition("A", (10, 10), (5, 20))


def test_char_scales_of_empty_font_raises():
    with pytest.raises(ValueError):
        FontLayout().char_scales()