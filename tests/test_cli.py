import pytest

from work_calendar.cli import build_parser


def test_gui_is_the_default_command():
    args = build_parser().parse_args([])
    assert args.command is None
    assert args.log_level is None


def test_log_level_is_normalised():
    args = build_parser().parse_args(["--log-level", "debug", "gui"])
    assert args.command == "gui"
    assert args.log_level == "DEBUG"


def test_unknown_level_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "loud"])
