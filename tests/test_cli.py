import io

import pytest

from lptsched.cli import main, parse_durations, prompt_durations
from lptsched.scheduler import TASK_NAMES


def test_parse_durations_values():
    assert parse_durations(["70", " 200 ", "0"]) == [70, 200, 0]


@pytest.mark.parametrize("bad", [["-5"], ["abc"], ["7.5"]])
def test_parse_durations_rejects(bad):
    with pytest.raises(ValueError):
        parse_durations(bad)


def test_prompt_retries_until_valid():
    lines = iter(["abc\n", "-5\n", "70\n", "200\n", "190\n", "250\n", "300\n"])
    written = []
    result = prompt_durations(lambda: next(lines, ""), written.append)
    assert result == [70, 200, 190, 250, 300]
    text = "".join(written)
    assert text.startswith("Enter durations for each module (in ms):\n")
    retry = f"Please enter a valid non-negative integer for {TASK_NAMES[0]}: "
    assert text.count(retry) == 2


def test_prompt_raises_on_eof():
    lines = iter(["70\n"])
    with pytest.raises(EOFError):
        prompt_durations(lambda: next(lines, ""), lambda text: None)


def test_main_defaults(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "All modules completed at 350 ms" in out
    assert out.startswith("Autonomous Robot Car Packing Scheduler (LPT)\n")


def test_main_with_arguments(capsys):
    assert main(["100", "--gpus", "1"]) == 0
    out = capsys.readouterr().out
    assert "All modules completed at 100 ms" in out
    assert "GPUs: 1, Modules: 1" in out


def test_main_rejects_negative():
    with pytest.raises(SystemExit) as info:
        main(["--", "-5"])
    assert info.value.code == 2


def test_main_rejects_zero_gpus():
    with pytest.raises(SystemExit) as info:
        main(["100", "--gpus", "0"])
    assert info.value.code == 2


def test_main_interactive(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("100\n100\n100\n100\n100\n"))
    assert main(["-i"]) == 0
    out = capsys.readouterr().out
    assert "Modules: 5" in out
    assert "  Task 4: Control (Actuator Commands) (100 ms)" in out


def test_main_interactive_eof(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("100\n"))
    assert main(["-i"]) == 1
    assert "input ended" in capsys.readouterr().err