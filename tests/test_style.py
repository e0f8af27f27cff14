import pytest

from gostman.style import boundary_message, boundary_view, palette, place_horizontal


def test_palette_names_are_unique():
    names = [entry[0] for entry in palette()]
    assert len(names) == len(set(names))


def test_palette_has_screen_attributes():
    names = {entry[0] for entry in palette()}
    assert {"base", "header_text", "error_header_text", "border", "focused_border", "title", "heading"} <= names


def test_palette_entries_have_six_fields():
    assert all(len(entry) == 6 for entry in palette())


def test_palette_returns_fresh_list():
    first = palette()
    first.clear()
    assert palette()


@pytest.mark.parametrize("width", [5, 10, 40])
def test_place_horizontal_pads_to_width(width):
    result = place_horizontal("abc", width)
    assert len(result) == width
    assert result.startswith("abc")
    assert result[3:].strip() == ""


def test_place_horizontal_custom_fill():
    assert place_horizontal("ab", 4, "/") == "ab//"


def test_place_horizontal_wider_text_unchanged():
    assert place_horizontal("abcdef", 3) == "abcdef"


def test_place_horizontal_counts_wide_characters():
    assert place_horizontal("界", 4) == "界  "


def test_place_horizontal_multiline():
    result = place_horizontal("a\nbcd", 6)
    lines = result.split("\n")
    assert [len(line) for line in lines] == [6, 6]
    assert lines[0].startswith("a") and lines[1].startswith("bcd")


def test_place_horizontal_empty_fill_rejected():
    with pytest.raises(ValueError):
        place_horizontal("a", 5, "")


def test_boundary_view():
    result = boundary_view("Ctrl+c to quit, F2 for help", 80)
    assert result.startswith("+-- Ctrl+c to quit, F2 for help")
    assert len(result) == 80


def test_boundary_message():
    result = boundary_message("Request Sent!", 30)
    assert result.rstrip() == "Request Sent!"
    assert len(result) == 30