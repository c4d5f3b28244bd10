from bgrun.job import JobOutcome
from bgrun.popup import (
    STYLE_DIM,
    STYLE_FAILURE,
    STYLE_SUCCESS,
    PopupGeometry,
    build_lines,
    compute_geometry,
    summary_text,
    truncate,
)


def _text_at(lines, row):
    return next(line for line in lines if line.row == row)


def test_geometry_centers_default_size_on_large_screen():
    geo = compute_geometry(24, 80)
    assert (geo.height, geo.width) == (9, 60)
    assert geo.start_y == (24 - 9) // 2
    assert geo.start_x == (80 - 60) // 2
    assert geo.inner_width == 56
    assert geo.viable


def test_geometry_clamps_to_small_screen_with_margin():
    for rows, cols in [(8, 40), (10, 61), (5, 20), (11, 30), (4, 14)]:
        geo = compute_geometry(rows, cols)
        assert geo.width <= cols - 2
        assert geo.height <= rows - 2
        assert geo.start_x >= 1
        assert geo.start_y >= 1
        assert geo.start_x + geo.width <= cols - 1
        assert geo.start_y + geo.height <= rows - 1


def test_geometry_not_viable_on_tiny_screen():
    assert not compute_geometry(4, 10).viable
    assert not compute_geometry(2, 80).viable
    assert compute_geometry(5, 14).viable


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("exactly10!", 10) == "exactly10!"
    assert truncate("a" * 20, 10) == "a" * 7 + "..."
    assert truncate("abcdef", 2) == "ab"
    assert truncate("abc", 0) == ""


def test_success_layout():
    lines = build_lines(JobOutcome("sleep 0", 0))
    title = _text_at(lines, 1)
    assert "COMMAND COMPLETED" in title.text
    assert title.style == STYLE_SUCCESS
    assert title.bold
    assert _text_at(lines, 4).text == "sleep 0"
    assert _text_at(lines, 5).text == "Exit Code: 0"
    assert _text_at(lines, 7).style == STYLE_DIM


def test_failure_layout():
    lines = build_lines(JobOutcome("false", 1))
    title = _text_at(lines, 1)
    assert "COMMAND FAILED" in title.text
    assert title.style == STYLE_FAILURE
    assert _text_at(lines, 5).text == "Exit Code: 1"


def test_sentinel_is_a_failure():
    lines = build_lines(JobOutcome("missing-shell", -1))
    assert "COMMAND FAILED" in _text_at(lines, 1).text
    assert _text_at(lines, 5).text == "Exit Code: -1"


def test_long_command_truncated_with_ellipsis():
    geo = compute_geometry(24, 80)
    command = "rsync -av " + "/very/long/path" * 10
    line = _text_at(build_lines(JobOutcome(command, 0), geo), 4)
    assert line.text.endswith("...")
    assert len(line.text) == geo.inner_width
    assert command.startswith(line.text[:-3])


def test_rows_outside_short_popup_are_dropped():
    geo = PopupGeometry(height=6, width=30, start_y=1, start_x=1)
    lines = build_lines(JobOutcome("true", 0), geo)
    assert [line.row for line in lines] == [1, 3, 4]
    assert all(len(line.text) <= geo.inner_width for line in lines)


def test_summary_text():
    assert summary_text(JobOutcome("make", 2)) == "✗ COMMAND FAILED: make (exit code 2)"
