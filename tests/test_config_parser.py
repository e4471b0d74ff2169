"""Tests for the tdm.conf line parser."""
import io

import pytest

from tdm.configuration import ConfigEntry, ConfigParser, MalformedConfigLine


def parse_all(text):
    return list(ConfigParser(io.StringIO(text)))


class TestSplitting:
    """Key/value splitting and trimming."""

    def test_simple_pair(self):
        """Splits on '=' and trims around it."""
        assert parse_all("play = firefox\n") == [ConfigEntry("play", "firefox")]

    def test_no_spaces(self):
        """Works without any whitespace."""
        assert parse_all("play=firefox\n") == [ConfigEntry("play", "firefox")]

    @pytest.mark.parametrize("line", ["k=v", "k =v", "k= v", "k   =   v", "k \t=  v"])
    def test_key_right_trimmed_value_left_trimmed(self, line):
        """Key keeps no trailing spaces, value keeps no leading spaces."""
        entry = parse_all(line + "\n")[0]
        assert not entry.key.endswith(' ')
        assert not entry.value.startswith(' ')

    def test_leading_key_spaces_preserved(self):
        """Only the right side of the key is trimmed."""
        assert parse_all("  work  = x\n")[0].key == "  work"

    def test_trailing_value_spaces_preserved(self):
        """Only the left side of the value is trimmed."""
        assert parse_all("work =  tmux  \n")[0].value == "tmux  "

    def test_value_may_contain_separator(self):
        """Only the first '=' splits."""
        entry = parse_all("env = FOO=bar baz=1\n")[0]
        assert entry == ConfigEntry("env", "FOO=bar baz=1")

    def test_empty_key_and_value(self):
        """A bare '=' gives an empty key and value."""
        assert parse_all("=\n") == [ConfigEntry("", "")]

    def test_last_line_without_newline(self):
        """The final line does not need a newline."""
        assert parse_all("a = 1\nb = 2") == [ConfigEntry("a", "1"), ConfigEntry("b", "2")]

    def test_crlf_line_endings(self):
        """Windows line endings do not leak into values."""
        assert parse_all("a = 1\r\n") == [ConfigEntry("a", "1")]


class TestSkippedLines:
    """Comments and blank lines."""

    def test_comments_and_blanks_skipped(self):
        """Neither comments nor blank lines surface as entries."""
        text = "# sessions\n\nplay = firefox\n   \n\t\n# end\nwork = alacritty\n"
        assert [e.key for e in parse_all(text)] == ["play", "work"]

    def test_indented_hash_is_not_a_comment(self):
        """Only a '#' in the first column starts a comment."""
        assert parse_all(" # x = y\n") == [ConfigEntry(" # x", "y")]

    def test_empty_input(self):
        """Empty input yields nothing."""
        assert parse_all("") == []


class TestMalformedLines:
    """Lines without a separator are fatal."""

    def test_raises_with_raw_line(self):
        """The error carries the offending line."""
        parser = ConfigParser(io.StringIO("play = firefox\nbogus line\nwork = x\n"))
        assert parser.next_entry() == ConfigEntry("play", "firefox")
        with pytest.raises(MalformedConfigLine) as excinfo:
            parser.next_entry()
        assert excinfo.value.line == "bogus line"
        assert "bogus line" in str(excinfo.value)

    def test_no_entries_after_error(self):
        """Parsing does not continue past the bad line."""
        source = io.StringIO("bogus\nwork = x\n")
        parser = ConfigParser(source)
        with pytest.raises(MalformedConfigLine):
            parser.next_entry()
        assert parser.next_entry() is None
        assert source.closed

    def test_iteration_propagates_error(self):
        """Iterating stops with the error."""
        with pytest.raises(MalformedConfigLine):
            parse_all("a = 1\nnope\n")


class TestSourceLifecycle:
    """The source is closed by the parser."""

    def test_closed_at_end_of_input(self):
        """End of input closes the source and keeps returning None."""
        source = io.StringIO("a = 1\n")
        parser = ConfigParser(source)
        assert parser.next_entry() is not None
        assert parser.next_entry() is None
        assert source.closed
        assert parser.closed
        assert parser.next_entry() is None

    def test_context_manager_closes(self):
        """Leaving the with block closes an unfinished source."""
        source = io.StringIO("a = 1\nb = 2\n")
        with ConfigParser(source) as parser:
            parser.next_entry()
        assert source.closed
