"""Tests for tmux row parsing."""

from tmuxmcp.adapters.tmux.models import (
    PaneInfo,
    parse_flag,
    parse_int,
    parse_panes,
    parse_sessions,
    parse_windows,
)


class TestParseInt:
    """Lenient numeric parsing"""

    def test_valid(self):
        assert parse_int("42") == 42

    def test_surrounding_whitespace(self):
        assert parse_int(" 7 ") == 7

    def test_invalid_defaults_to_zero(self):
        assert parse_int("abc") == 0
        assert parse_int("") == 0
        assert parse_int("3.5") == 0

    def test_custom_default(self):
        assert parse_int("?", default=-1) == -1

    def test_flag(self):
        assert parse_flag("1") is True
        assert parse_flag("2") is True
        assert parse_flag("0") is False
        assert parse_flag("") is False


class TestParseRows:
    """Malformed lines are skipped, numbers degrade to zero"""

    def test_under_length_lines_skipped(self):
        output = "API\t3\t1\t0\nbroken line\nlogs\t1\t0\t0\n"
        assert [s.name for s in parse_sessions(output)] == ["API", "logs"]

    def test_blank_lines_ignored(self):
        assert parse_windows("\n\nAPI\t0\teditor\t2\t1\n\n")[0].target == "API:0"

    def test_bad_numbers_become_zero(self):
        windows = parse_windows("API\tx\teditor\t??\t1\n")
        assert windows[0].index == 0
        assert windows[0].panes == 0

    def test_extra_fields_tolerated(self):
        sessions = parse_sessions("API\t3\t1\t0\tsomething-new\n")
        assert sessions[0].windows == 3

    def test_names_with_colons_and_spaces(self):
        """Tab delimiting keeps names intact"""
        windows = parse_windows("API\t2\tnpm run dev: watch\t1\t0\n")
        assert windows[0].name == "npm run dev: watch"

    def test_empty_output(self):
        assert parse_panes("") == []


class TestPaneInfo:
    """Test PaneInfo parsing"""

    def test_from_fields(self):
        raw = "API:5.1\tshell\t80x24\tactive\tzsh\t%2"
        pane = PaneInfo.from_fields(raw.split("\t"))

        assert pane.session == "API"
        assert pane.window_index == 5
        assert pane.index == 1
        assert pane.title == "shell"
        assert pane.width == 80
        assert pane.height == 24
        assert pane.active is True
        assert pane.command == "zsh"
        assert pane.pane_id == "%2"
        assert pane.target == "API:5.1"
        assert pane.metadata == "API:5.1\tshell\t80x24\tactive"

    def test_malformed_dimensions_become_zero(self):
        pane = parse_panes("API:0.0\ttitle\t?\t\tbash\t%0\n")[0]
        assert pane.dimensions == "0x0"
        assert pane.active is False
