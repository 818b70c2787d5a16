import re

import pytest

from barstatus.cli import Options, build_status, main, parse_args
from barstatus.config import Component


def _fixed(text):
    return Component(lambda: text, "%s")


def test_build_status_concatenates_pieces():
    components = [_fixed("a"), Component(lambda: "b", "-%s-"), _fixed("c")]
    assert build_status(components, "n/a", 2048) == "a-b-c"


def test_build_status_substitutes_unknown():
    components = [_fixed("x"), Component(lambda: None, " [%s]")]
    assert build_status(components, "n/a", 2048) == "x [n/a]"


def test_build_status_empty_components():
    assert build_status([], "n/a", 2048) == ""


def test_build_status_truncates_and_stops(capsys):
    components = [_fixed("abcdefgh"), _fixed("zzz")]
    assert build_status(components, "n/a", 5) == "abcd"
    assert "Output truncated" in capsys.readouterr().err


def test_build_status_stops_after_piece_that_does_not_fit(capsys):
    components = [_fixed("ab"), _fixed("cdef"), _fixed("g")]
    result = build_status(components, "n/a", 5)
    assert result == "abcd"
    assert "g" not in result


def test_build_status_never_exceeds_limit():
    components = [_fixed("0123456789")] * 10
    for maxlen in (1, 2, 7, 33, 100):
        result = build_status(components, "n/a", maxlen)
        assert len(result.encode("utf-8")) <= maxlen - 1


def test_build_status_rejects_bad_maxlen():
    with pytest.raises(ValueError):
        build_status([_fixed("a")], "n/a", 0)


def test_build_status_bad_format_stops(capsys):
    components = [_fixed("ok"), Component(lambda: "x", "%d")]
    assert build_status(components, "n/a", 2048) == "ok"
    assert capsys.readouterr().err


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], Options(stdout=False, once=False)),
        (["-s"], Options(stdout=True, once=False)),
        (["-1"], Options(stdout=True, once=True)),
        (["-s1"], Options(stdout=True, once=True)),
        (["-s", "-1"], Options(stdout=True, once=True)),
        (["--"], Options(stdout=False, once=False)),
        (["-s", "--"], Options(stdout=True, once=False)),
    ],
)
def test_parse_args(argv, expected):
    assert parse_args(argv) == expected


@pytest.mark.parametrize(
    "argv",
    [["-x"], ["-sx"], ["extra"], ["-s", "extra"], ["--", "extra"], ["-"]],
)
def test_parse_args_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_main_once_prints_single_status_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\n", out)


def test_main_rejects_unknown_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["-q"])
    assert info.value.code == 1
    assert "[-s] [-1]" in capsys.readouterr().err