import io
import random
import sys

import pytest

from pushswap.cli import check, checker_main, main, read_instructions
from pushswap.parsing import InputError


def test_read_instructions_keeps_newlines():
    lines = list(read_instructions(io.StringIO("sa\npb\nra")))
    assert lines == ["sa\n", "pb\n", "ra"]


def test_check_sorted_after_swap():
    assert check([2, 1], ["sa\n"]) is True


def test_check_unsorted_without_moves():
    assert check([2, 1], []) is False


def test_check_requires_empty_b():
    assert check([1, 2, 3], ["pb\n"]) is False


def test_check_skips_impossible_push():
    assert check([1, 2], ["pa\n"]) is True


@pytest.mark.parametrize("line", ["ss\n", "sa", "xx\n", " sa\n", "sa \n"])
def test_check_rejects_bad_lines(line):
    with pytest.raises(InputError):
        check([2, 1], [line])


def test_main_prints_moves(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize("args", [["1", "1"], ["2", "x"], ["3", "-"]])
def test_main_reports_errors(args, capsys):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_checker_main_ok(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa\n"))
    assert checker_main(["2", "1"]) == 0
    assert capsys.readouterr().out == "\033[0;32mOK\n"


def test_checker_main_ko(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    checker_main(["2 1"])
    assert capsys.readouterr().out == "\033[0;31mKO\n"


def test_checker_main_bad_instruction(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ss\n"))
    checker_main(["2", "1"])
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_checker_main_single_value_is_silent(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa\n"))
    checker_main(["7"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""