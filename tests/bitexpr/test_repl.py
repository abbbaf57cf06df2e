"""Tests for the interactive loop and command-line entry point."""

import io
import logging

import pytest

from bitexpr import BitExpr
from bitexpr.__main__ import main, parse_arguments
from bitexpr.bitexpr_repl import BitExprRepl


def run_repl(text: str, width: int = 32, signed: bool = False) -> str:
    """Run the loop over some input text and return everything it printed."""
    output = io.StringIO()
    repl = BitExprRepl(BitExpr(width=width), io.StringIO(text), output, signed=signed)
    assert repl.run() == 0
    return output.getvalue()


class TestRepl:
    """Test the read-evaluate-print loop."""

    def test_results_and_errors(self):
        """Test a session with valid and invalid expressions."""
        output = run_repl("1+2*3\n5/0\n(1+2\n\n")
        assert output == "> Result: 7\n> Invalid expression!\n> Result: 3\n> "

    def test_empty_line_stops(self):
        """Test that lines after the first empty one are not read."""
        assert run_repl("\n1+1\n") == "> "

    def test_end_of_input_stops(self):
        """Test that running out of input ends the loop."""
        assert run_repl("2+2") == "> Result: 4\n> "

    def test_windows_line_endings(self):
        """Test that carriage returns are stripped with the newline."""
        assert run_repl("2+2\r\n\r\n") == "> Result: 4\n> "

    def test_signed_display(self):
        """Test showing results as signed values."""
        assert run_repl("-5+3\n5-3\n", signed=True) == "> Result: -2\n> Result: 2\n> "

    def test_signed_display_other_width(self):
        """Test signed display honours the word width."""
        assert run_repl("0-1\n127\n128\n", width=8, signed=True) == (
            "> Result: -1\n> Result: 127\n> Result: -128\n> "
        )

    def test_unsigned_display(self):
        """Test the default unsigned display."""
        assert run_repl("-5+3\n") == "> Result: 4294967294\n> "

    def test_invalid_expression_logged(self, caplog):
        """Test that rejected expressions are logged."""
        with caplog.at_level(logging.INFO, logger="BitExprRepl"):
            run_repl("1+2)\n")

        assert "Invalid expression" in caplog.text


class TestCommandLine:
    """Test the command-line entry point."""

    def test_defaults(self):
        """Test default argument values."""
        args = parse_arguments([])
        assert args.expression is None
        assert args.width == 32
        assert not args.signed
        assert args.log_file is None
        assert not args.verbose

    def test_invalid_width_rejected(self):
        """Test that argparse refuses unsupported widths."""
        with pytest.raises(SystemExit):
            parse_arguments(["--width", "12"])

    def test_one_shot_success(self, capsys):
        """Test evaluating a single expression from the command line."""
        assert main(["1+2*3"]) == 0
        assert capsys.readouterr().out == "Result: 7\n"

    def test_one_shot_failure(self, capsys):
        """Test that an invalid one-shot expression exits with status 1."""
        assert main(["5/0"]) == 1
        assert capsys.readouterr().out == "Invalid expression!\n"

    def test_one_shot_width_and_signed(self, capsys):
        """Test width and signed options together."""
        assert main(["--width", "16", "--signed", "0-1"]) == 0
        assert capsys.readouterr().out == "Result: -1\n"

    def test_interactive(self, capsys, monkeypatch):
        """Test interactive mode reading from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("10-2-3\n\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "> Result: 5\n> "

    def test_log_file(self, tmp_path, capsys):
        """Test that a debug log is written when requested."""
        log_file = tmp_path / "bitexpr.log"
        assert main(["--log-file", str(log_file), "1+2)"]) == 1
        capsys.readouterr()

        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding='utf-8')
        assert "BitExprConverter" in content or "BitExprParser" in content
        assert "Unmatched closing bracket" in content
