# tests/test_cli.py

import pytest

from calconv.cli import main


def rows(out):
    """Map the first column of each output line to the remaining columns."""
    return {line.split()[0]: line.split()[1:] for line in out.splitlines() if line.strip()}


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "hebrew" in out
    assert "tzolkin" in out

def test_to_jdn(capsys):
    assert main(["to-jdn", "gregorian", "2000", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2451544.5"

def test_from_jdn_single(capsys):
    assert main(["from-jdn", "hebrew", "2451544.5"]) == 0
    assert capsys.readouterr().out.strip() == "5760 10 23"

def test_from_jdn_all(capsys):
    assert main(["from-jdn", "all", "2451544.5"]) == 0
    r = rows(capsys.readouterr().out)
    assert r["long_count"] == ["12", "19", "6", "15", "2"]
    assert r["islamic"] == ["1420", "9", "24"]

def test_convert(capsys):
    assert main(["convert", "julian", "1582", "10", "4", "--to", "gregorian"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["jdn", "2299159.5"]
    assert lines[1].split() == ["gregorian", "1582", "10", "14"]

def test_bare_date_shortcut(capsys):
    assert main(["2000-01-01"]) == 0
    r = rows(capsys.readouterr().out)
    assert r["persian"] == ["1378", "10", "11"]
    assert r["haab"] == ["14", "10"]

def test_date_with_negative_year(capsys):
    assert main(["date", "-0001-12-31"]) == 0
    r = rows(capsys.readouterr().out)
    assert r["gregorian"] == ["-1", "12", "31"]
    assert r["julian"] == ["-1", "1", "2"]

def test_bad_date():
    with pytest.raises(SystemExit):
        main(["date", "2000/01/01"])

def test_strict_error_becomes_exit_message():
    with pytest.raises(SystemExit) as ei:
        main(["to-jdn", "gregorian", "2023", "2", "30", "--strict"])
    assert str(ei.value).startswith("calconv: ")

def test_unknown_calendar_exit():
    with pytest.raises(SystemExit) as ei:
        main(["from-jdn", "coptic", "2451544.5"])
    assert "coptic" in str(ei.value)

def test_no_inverse_exit():
    with pytest.raises(SystemExit) as ei:
        main(["to-jdn", "haab", "14", "10"])
    assert "haab" in str(ei.value)

def test_today(capsys):
    assert main(["today"]) == 0
    assert capsys.readouterr().out.startswith("jdn")

def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--calendars", "hebrew,persian", "--N", "50"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
