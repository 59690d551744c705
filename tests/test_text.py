import pytest

from bemhelper.host import SourceDocument
from bemhelper.text import LineIndex, Position, TextRange


def test_line_index_maps_offsets_to_positions() -> None:
    index = LineIndex("ab\ncd\n\nef")

    assert index.line_count == 4
    assert index.position_at(0) == Position(0, 0)
    assert index.position_at(2) == Position(0, 2)
    assert index.position_at(3) == Position(1, 0)
    assert index.position_at(7) == Position(3, 0)
    assert index.position_at(9) == Position(3, 2)


def test_line_index_clamps_out_of_bounds_offsets() -> None:
    index = LineIndex("ab\ncd")

    assert index.position_at(-5) == Position(0, 0)
    assert index.position_at(99) == Position(1, 2)


def test_line_text_strips_line_breaks() -> None:
    index = LineIndex("first\r\nsecond\n")

    assert index.line_text(0) == "first"
    assert index.line_text(1) == "second"
    assert index.line_text(2) == ""
    assert index.line_text(7) == ""


def test_source_document_exposes_host_interface() -> None:
    document = SourceDocument('<p>\n<a class="x"></a>', uri="file:///a.html")

    assert document.get_text().startswith("<p>")
    assert document.position_at(5) == Position(1, 1)
    assert document.get_line_text(1) == '<a class="x"></a>'


def test_text_range_invariants() -> None:
    assert TextRange(2, 5).start == 2
    assert TextRange(2, 5).end == 5
    assert TextRange(3, 3) < TextRange(3, 4)
    with pytest.raises(ValueError):
        TextRange(5, 2)
    with pytest.raises(ValueError):
        TextRange(-1, 2)
