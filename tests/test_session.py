"""Tests for the interactive session loop."""

import sys

import pytest

import callcost
from callcost import main, run_session, wants_another
from collector import CallInputCollector
from rating import FlatRateCalculator


def start_session(scripted_input, lines):
    read_line = scripted_input(lines)
    calls = run_session(CallInputCollector(read_line), FlatRateCalculator(), read_line)
    return calls, read_line


class TestWantsAnother:
    """Tests for wants_another function."""

    def test_no_stops(self, capsys):
        assert wants_another("n") is False
        assert wants_another("N") is False
        assert wants_another("  no thanks") is False
        assert capsys.readouterr().out == ""

    def test_yes_continues(self, capsys):
        assert wants_another("y") is True
        assert wants_another("Yes") is True
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("answer", ["maybe", "q", "", "1"])
    def test_anything_else_is_yes(self, answer, capsys):
        assert wants_another(answer) is True
        assert "I'll take that as a yes" in capsys.readouterr().out


class TestRunSession:
    """Tests for run_session function."""

    @pytest.mark.parametrize("lines, expected", [
        (["Mo", "09:30", "10"], "$4.00"),
        (["Sa", "23:00", "60"], "$9.00"),
        (["Th", "06:00", "15"], "$3.75"),
        (["Su", "12:00", "1"], "$0.15"),
        (["Fr", "18:45", "20"], "$8.00"),
    ])
    def test_single_call(self, scripted_input, capsys, lines, expected):
        calls, read_line = start_session(scripted_input, lines + ["n"])

        assert calls == 1
        assert read_line.remaining == 0
        out = capsys.readouterr().out
        assert f"The cost of your call is {expected}" in out

    def test_yes_then_no_runs_two_calls(self, scripted_input, capsys):
        calls, read_line = start_session(scripted_input, [
            "Mo", "09:30", "10", "y",
            "Su", "12:00", "1", "n",
        ])

        assert calls == 2
        assert read_line.remaining == 0
        out = capsys.readouterr().out
        assert out.count(callcost.GREETING) == 2
        assert "The cost of your call is $4.00" in out
        assert "The cost of your call is $0.15" in out

    def test_unclear_answer_continues(self, scripted_input, capsys):
        calls, _ = start_session(scripted_input, [
            "We", "20:00", "4", "sure",
            "Tu", "08:00", "4", "N",
        ])

        assert calls == 2
        out = capsys.readouterr().out
        assert "I'll take that as a yes" in out
        assert "The cost of your call is $1.00" in out
        assert "The cost of your call is $1.60" in out

    def test_bad_input_is_retried_within_call(self, scripted_input, capsys):
        calls, _ = start_session(scripted_input, [
            "Tx", "Mo", "24:30", "10:00", "abc", "5", "n",
        ])

        assert calls == 1
        out = capsys.readouterr().out
        assert "You entered an invalid weekday." in out
        assert "You entered an invalid minutes." in out
        assert "You did not enter a valid number." in out
        assert "The cost of your call is $2.00" in out

    def test_end_of_input_raises(self, scripted_input):
        with pytest.raises(EOFError):
            start_session(scripted_input, ["Mo", "09:30"])


class TestMain:
    """Tests for the command-line entry point."""

    def test_runs_until_no(self, monkeypatch, scripted_input, capsys):
        monkeypatch.setattr(sys, "argv", ["callcost"])
        monkeypatch.setattr("builtins.input", scripted_input(["Fr", "18:45", "20", "n"]))

        main()

        assert "The cost of your call is $8.00" in capsys.readouterr().out

    def test_oversized_time_reprompts(self, monkeypatch, scripted_input, capsys):
        monkeypatch.setattr(sys, "argv", ["callcost"])
        monkeypatch.setattr("builtins.input", scripted_input([
            "Mo", "9" * 5000 + ":00", "09:" + "9" * 5000, "09:30", "10", "n",
        ]))

        main()

        captured = capsys.readouterr()
        assert "You entered an invalid hour." in captured.out
        assert "You entered an invalid minutes." in captured.out
        assert "The cost of your call is $4.00" in captured.out
        assert captured.err == ""

    def test_end_of_input_exits_cleanly(self, monkeypatch, scripted_input, capsys):
        monkeypatch.setattr(sys, "argv", ["callcost"])
        monkeypatch.setattr("builtins.input", scripted_input(["Mo"]))

        main()

        assert "You entered: Monday" in capsys.readouterr().out

    def test_keyboard_interrupt_exits_130(self, monkeypatch, capsys):
        def interrupt(prompt=""):
            raise KeyboardInterrupt

        monkeypatch.setattr(sys, "argv", ["callcost"])
        monkeypatch.setattr("builtins.input", interrupt)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 130
        assert "Operation cancelled by user." in capsys.readouterr().err

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["callcost", "--log-level", "LOUD"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2
