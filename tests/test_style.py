"""Tests for dbg.style: names, out-of-range values and the bound helpers."""

import pytest

import dbg
from dbg.style import Style, style_name


@pytest.mark.parametrize(
    ("style", "name"),
    [
        (dbg.NOOP, "NoOp"),
        (dbg.PLAIN, "Plain"),
        (dbg.FILE_LINE, "FileLine"),
        (dbg.FUNC, "Func"),
    ],
)
def test_style_names(style: Style, name: str) -> None:
    assert str(style) == name
    assert style_name(style) == name
    assert f"{style}" == name


def test_style_values_are_ordered() -> None:
    assert [int(s) for s in Style] == [0, 1, 2, 3]


@pytest.mark.parametrize("value", [4, 7, 42])
def test_undefined_style_renders_as_decimal(value: int) -> None:
    assert style_name(value) == str(value)


def test_style_name_accepts_plain_ints() -> None:
    assert style_name(2) == "FileLine"


def test_style_log_uses_default_printer(capsys) -> None:
    """Style.log writes through the process-wide printer (stdout by default)."""
    assert dbg.PLAIN.log("hello", "world") is None
    assert capsys.readouterr().out == "hello world\n"


def test_style_logf_uses_default_printer(capsys) -> None:
    assert dbg.PLAIN.logf("%d items", 3) is None
    assert capsys.readouterr().out == "3 items\n"


def test_noop_prints_nothing(capsys) -> None:
    assert dbg.NOOP.log("anything") is None
    assert dbg.NOOP.logf("%s", "anything") is None
    assert capsys.readouterr().out == ""


def test_style_log_reports_user_frame(sink) -> None:
    """The bound helper must not report its own frame as the caller."""
    dbg.set_writer(sink)
    dbg.FUNC.log("here")
    assert sink.getvalue() == f"{__name__}.test_style_log_reports_user_frame() here\n"
