import pytest

from barstatus.util import fmt_human, read_text, read_uint, warn


def test_fmt_human_binary_kibi():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_binary_mebi():
    assert fmt_human(1024 * 1024, 1024) == "1.0 Mi"


def test_fmt_human_si_kilo():
    assert fmt_human(1500, 1000) == "1.5 k"


@pytest.mark.parametrize("num", [0, 5, 999])
def test_fmt_human_small_values_have_no_prefix(num):
    assert fmt_human(num, 1000) == f"{num:.1f} "


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [1, 1023, 10**6, 3 * 1024**3, 10**20])
def test_fmt_human_scaled_value_is_below_base(base, num):
    value, _, prefix = fmt_human(num, base).partition(" ")
    assert 0 <= float(value) < base
    if base == 1024 and prefix:
        assert prefix.endswith("i")


def test_fmt_human_caps_at_largest_prefix():
    assert fmt_human(1000**10, 1000).endswith(" Y")


@pytest.mark.parametrize("base", [0, 10, 1023])
def test_fmt_human_rejects_invalid_base(base):
    with pytest.raises(ValueError):
        fmt_human(100, base)


def test_read_text_round_trip(tmp_path):
    target = tmp_path / "value"
    target.write_text("hello\nworld\n")
    assert read_text(target) == "hello\nworld\n"


def test_read_text_missing_file_warns(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert read_text(missing) is None
    assert str(missing) in capsys.readouterr().err


def test_read_uint_parses_leading_number(tmp_path):
    target = tmp_path / "num"
    target.write_text("  42 trailing\n")
    assert read_uint(target) == 42


def test_read_uint_non_numeric_gives_none(tmp_path):
    target = tmp_path / "num"
    target.write_text("abc\n")
    assert read_uint(target) is None


def test_read_uint_missing_file_gives_none(tmp_path):
    assert read_uint(tmp_path / "absent") is None


def test_warn_writes_prefixed_message(capsys):
    warn("something broke")
    err = capsys.readouterr().err
    assert err.endswith(": something broke\n")


def test_warn_usage_has_no_prefix(capsys):
    warn("usage: prog [-s] [-1]")
    assert capsys.readouterr().err == "usage: prog [-s] [-1]\n"