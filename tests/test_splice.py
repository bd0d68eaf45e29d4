import pytest

from line_editor.buffer import (
    InsufficientCapacityError,
    LineNotFoundError,
    ReplaceError,
    count_lines,
    find_line_span,
    replace_line,
)


def make_buffer(text: str) -> bytearray:
    return bytearray(text.encode("utf-8"))


def test_replace_middle_line_same_length() -> None:
    buffer = make_buffer("alpha\nbeta\ngamma")

    outcome = replace_line(buffer, 1024, 1, b"BETA")

    assert buffer == b"alpha\nBETA\ngamma"
    assert outcome.line_start == 6
    assert outcome.delta == 0
    assert outcome.truncated is False


def test_replace_grows_and_shifts_tail() -> None:
    buffer = make_buffer("a\nb\nc")

    outcome = replace_line(buffer, 1024, 1, b"xyz")

    assert buffer == b"a\nxyz\nc"
    assert outcome.old_length == 1
    assert outcome.new_length == 3
    assert outcome.delta == 2


def test_replace_shrinks_and_shifts_tail() -> None:
    buffer = make_buffer("a\nlonger line\nc\nd")

    outcome = replace_line(buffer, 1024, 1, b"")

    assert buffer == b"a\n\nc\nd"
    assert outcome.delta == -11


def test_replace_first_line() -> None:
    buffer = make_buffer("first\nsecond")

    replace_line(buffer, 1024, 0, b"1")

    assert buffer == b"1\nsecond"


def test_replace_last_line_does_not_add_newline() -> None:
    buffer = make_buffer("a\nb")

    replace_line(buffer, 1024, 1, b"ccc")

    assert buffer == b"a\nccc"
    assert not buffer.endswith(b"\n")


def test_trailing_newline_introduces_empty_last_line() -> None:
    buffer = make_buffer("a\n")

    assert count_lines(buffer) == 2
    replace_line(buffer, 1024, 1, b"b")

    assert buffer == b"a\nb"


def test_empty_buffer_has_one_line() -> None:
    buffer = bytearray()

    replace_line(buffer, 1024, 0, b"hello")

    assert buffer == b"hello"


def test_truncates_replacement_to_capacity() -> None:
    buffer = make_buffer("alpha\nbeta")

    outcome = replace_line(buffer, 10, 1, b"longtext")

    assert outcome.truncated is True
    assert outcome.dropped == 5
    assert outcome.new_length == 3
    assert buffer == b"alpha\nlon"
    assert len(buffer) <= 10 - 1


def test_truncates_to_empty_when_no_room_left() -> None:
    buffer = make_buffer("abc\nd")

    outcome = replace_line(buffer, 5, 1, b"xyz")

    assert buffer == b"abc\n"
    assert outcome.dropped == 3


def test_line_past_end_is_not_found_and_buffer_unchanged() -> None:
    buffer = make_buffer("alpha\nbeta")

    with pytest.raises(LineNotFoundError) as excinfo:
        replace_line(buffer, 1024, 5, b"x")

    assert buffer == b"alpha\nbeta"
    assert excinfo.value.line_index == 5
    assert excinfo.value.line_count == 2


def test_line_index_equal_to_line_count_is_not_found() -> None:
    buffer = make_buffer("one\ntwo\nthree")

    with pytest.raises(LineNotFoundError):
        replace_line(buffer, 1024, count_lines(buffer), b"x")


def test_negative_line_index_is_not_found() -> None:
    buffer = make_buffer("one")

    with pytest.raises(LineNotFoundError):
        replace_line(buffer, 1024, -1, b"x")


def test_insufficient_capacity_leaves_buffer_unchanged() -> None:
    buffer = make_buffer("abcdef\nxy")

    with pytest.raises(InsufficientCapacityError) as excinfo:
        replace_line(buffer, 5, 1, b"z")

    assert isinstance(excinfo.value, ReplaceError)
    assert excinfo.value.required == 8
    assert excinfo.value.capacity == 5
    assert buffer == b"abcdef\nxy"


def test_capacity_must_leave_room_for_terminator() -> None:
    with pytest.raises(ValueError):
        replace_line(bytearray(), 0, 0, b"")


def test_other_lines_are_preserved() -> None:
    lines = [b"zero", b"one", b"two", b"three", b"four"]
    buffer = bytearray(b"\n".join(lines))

    replace_line(buffer, 1024, 2, b"a much longer second line")

    result = bytes(buffer).split(b"\n")
    assert result[:2] == lines[:2]
    assert result[3:] == lines[3:]
    assert result[2] == b"a much longer second line"


def test_relocating_line_returns_replacement() -> None:
    buffer = make_buffer("alpha\nbeta\ngamma")

    for index, text in enumerate([b"A", b"BBBBBBBB", b""]):
        replace_line(buffer, 1024, index, text)
        span = find_line_span(buffer, index)
        assert bytes(buffer[span.start : span.end]) == text


def test_replacing_twice_with_same_text_is_idempotent() -> None:
    buffer = make_buffer("alpha\nbeta\ngamma")

    replace_line(buffer, 1024, 1, b"delta")
    after_first = bytes(buffer)
    outcome = replace_line(buffer, 1024, 1, b"delta")

    assert bytes(buffer) == after_first
    assert outcome.delta == 0


def test_find_line_span_bounds() -> None:
    buffer = b"ab\ncde\n"

    assert find_line_span(buffer, 0).start == 0
    assert find_line_span(buffer, 0).end == 2
    middle = find_line_span(buffer, 1)
    assert (middle.start, middle.end, middle.length) == (3, 6, 3)
    last = find_line_span(buffer, 2)
    assert (last.start, last.end) == (7, 7)
