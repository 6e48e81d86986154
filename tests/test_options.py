import pytest

from glasstty.options import UsageError, parse_args


def test_defaults():
    opts = parse_args("vt05", ["sh"])
    assert opts.command == ["sh"]
    assert (opts.baud, opts.scale, opts.rerun, opts.fullscreen, opts.backspace_is_rubout) == (
        0, 1, False, False, False,
    )


def test_baud_separate_argument():
    opts = parse_args("vt05", ["-b", "9600", "sh", "-l"])
    assert opts.baud == 9600
    assert opts.command == ["sh", "-l"]


def test_baud_attached():
    assert parse_args("vt05", ["-b300", "sh"]).baud == 300


def test_baud_is_parsed_leniently():
    assert parse_args("vt05", ["-b", "1200x", "sh"]).baud == 1200
    assert parse_args("vt05", ["-b", "fast", "sh"]).baud == 0


def test_scale_counts_repeats():
    assert parse_args("vt52", ["-22", "-2", "sh"]).scale == 4


def test_clustered_flags():
    opts = parse_args("vt52", ["-Brf", "sh"])
    assert opts.backspace_is_rubout and opts.rerun and opts.fullscreen


def test_double_dash_ends_options():
    assert parse_args("vt52", ["--", "-f"]).command == ["-f"]


def test_lone_dash_is_command():
    assert parse_args("vt52", ["-", "x"]).command == ["-", "x"]


def test_options_stop_at_command():
    opts = parse_args("vt52", ["sh", "-f"])
    assert opts.command == ["sh", "-f"]
    assert not opts.fullscreen


def test_extra_flag():
    assert parse_args("dp3300", ["-a", "sh"], "a").flags == frozenset("a")


def test_extra_flag_unknown_elsewhere():
    with pytest.raises(UsageError):
        parse_args("vt05", ["-a", "sh"])


def test_missing_command():
    with pytest.raises(UsageError, match="usage: vt05"):
        parse_args("vt05", ["-f"])


def test_missing_baud_value():
    with pytest.raises(UsageError):
        parse_args("vt05", ["-b"])


def test_unknown_flag():
    with pytest.raises(UsageError):
        parse_args("vt05", ["-z", "sh"])