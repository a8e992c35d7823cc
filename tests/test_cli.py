"""End-to-end tests for the command-line entry point."""

import re

import pytest

from qif_benchmark.cli import build_arg_parser, main

LINE_PATTERN = re.compile(
    r"^PYTHON: Done processing (\d+) items\. "
    r"Time it would take to process 1M items: (\d+)ms$"
)


class TestArguments:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default arguments."""
        args = build_arg_parser().parse_args([])
        assert args.count == 10_000
        assert args.date_format == "MM/DD/YYYY"
        assert args.account_type == "Bank"
        assert args.validate
        assert not args.memory

    def test_rejects_unknown_date_format(self):
        """Test argparse refuses unsupported selectors."""
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(["--date-format", "YYYY-MM-DD"])


class TestMain:
    """Tests for main."""

    def test_default_run(self, capsys):
        """Test the 10000-record scenario prints one result line."""
        assert main([]) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 1
        match = LINE_PATTERN.match(out[0])
        assert match is not None
        assert match.group(1) == "10000"
        assert int(match.group(2)) >= 0

    def test_custom_count_and_prefix(self, capsys):
        """Test count and prefix flags."""
        assert main(["-n", "50", "--prefix", "QUIFFEN", "--no-validate"]) == 0
        out = capsys.readouterr().out.strip()
        assert out.startswith("QUIFFEN: Done processing 50 items.")

    def test_zero_count_is_refused(self, capsys):
        """Test an empty run fails clearly without printing a result."""
        assert main(["--count", "0"]) == 2
        assert capsys.readouterr().out == ""

    def test_logs_go_to_stderr(self, capsys):
        """Test stdout holds only the result line."""
        assert main(["-n", "5", "--memory"]) == 0
        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 1
