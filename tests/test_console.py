#
# Inspectkit - Console Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspectkit import console


# Tests ----------------------------------------------------------------------------------------------------------------

class TestWriters:
    def test_print(self, capsys):
        """Write arguments without separators."""
        console.print_("a", 1, None)
        assert capsys.readouterr().out == "a1None"

    def test_puts(self, capsys):
        """Write one line per argument."""
        console.puts("a", "b")
        assert capsys.readouterr().out == "a\nb\n"

    def test_debug(self, capsys):
        console.debug({"a": 1})
        captured = capsys.readouterr()
        assert captured.err == "DEBUG: {'a': 1}\n"
        assert captured.out == ""

    def test_error(self, capsys):
        console.error("x", "y")
        assert capsys.readouterr().err == "x\ny\n"

    def test_p_renders_and_warns_once(self, capsys):
        """Inspect arguments to stderr behind a one-time deprecation notice."""
        console.p({"a": 1})
        console.p([1])
        err = capsys.readouterr().err
        assert err.count("p() will be removed in future versions") == 1
        assert err.endswith("{ a: 1 }\n[ 1 ]\n")


class TestTimestamp:
    @pytest.mark.parametrize(
        "now, expected",
        [
            pytest.param(datetime(2024, 2, 6, 9, 5, 3), "6 Feb 09:05:03", id="padded-time"),
            pytest.param(datetime(2023, 12, 26, 16, 19, 34), "26 Dec 16:19:34", id="two-digit-day"),
        ],
    )
    def test_timestamp(self, now, expected):
        """Keep the day unpadded and the time zero-padded."""
        assert console.timestamp(now) == expected

    def test_timestamp_now(self):
        """Default to the current time."""
        month = console.timestamp().split()[1]
        assert month in console.MONTHS

    def test_log(self, capsys, monkeypatch):
        """Prefix messages with the timestamp."""
        monkeypatch.setattr(console, "timestamp", lambda: "26 Feb 16:19:34")
        console.log("started")
        assert capsys.readouterr().out == "26 Feb 16:19:34 - started\n"
