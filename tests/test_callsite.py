"""Tests for dbg.callsite: frame resolution and prefix formatting."""

import os
import sys

import pytest

from dbg.callsite import CallSite, format_prefix, resolve_caller
from dbg.style import Style
from dbg.utils.paths import PathCache


def _helper() -> CallSite:
    return resolve_caller(1)


def test_resolve_caller_reports_current_function() -> None:
    site = resolve_caller(0)
    assert site.ok
    assert site.filename == __file__
    assert site.function == f"{__name__}.test_resolve_caller_reports_current_function"
    assert site.lineno > 0


def test_resolve_caller_skips_frames() -> None:
    site = _helper()
    assert site.function == f"{__name__}.test_resolve_caller_skips_frames"


def test_resolve_caller_too_deep() -> None:
    site = resolve_caller(sys.getrecursionlimit() + 100)
    assert not site.ok
    assert site.pc == 0
    assert site.filename == ""
    assert site.function == ""


@pytest.fixture()
def layout(tmp_path):
    """A working directory and a root whose src tree holds a package."""
    work = tmp_path / "work"
    root = tmp_path / "root"
    return PathCache(root=root, cwd=work), work, root


def test_plain_prefix_is_empty(layout) -> None:
    paths, work, _ = layout
    site = CallSite(str(work / "a.py"), 3, "pkg.fn")
    assert format_prefix(Style.PLAIN, site, paths) == ""


def test_file_line_prefix_inside_cwd(layout) -> None:
    paths, work, _ = layout
    site = CallSite(str(work / "pkg" / "a.py"), 22, "pkg.a.fn")
    expected = os.path.join("pkg", "a.py")
    assert format_prefix(Style.FILE_LINE, site, paths) == f"{expected}:22: "


def test_file_line_prefix_under_root_source(layout) -> None:
    paths, _, root = layout
    site = CallSite(str(root / "src" / "example.com" / "dbg" / "a.py"), 7, "f")
    expected = os.path.join("example.com", "dbg", "a.py")
    assert format_prefix(Style.FILE_LINE, site, paths) == f"{expected}:7: "


def test_file_line_prefix_outside_both(layout) -> None:
    paths, _, root = layout
    other = root.parent / "other" / "b.py"
    site = CallSite(str(other), 1, "f")
    expected = os.path.relpath(str(other), str(root / "src"))
    assert format_prefix(Style.FILE_LINE, site, paths) == f"{expected}:1: "


def test_func_prefix(layout) -> None:
    paths, work, _ = layout
    site = CallSite(str(work / "a.py"), 3, "pkg.mod.Klass.method")
    assert format_prefix(Style.FUNC, site, paths) == "pkg.mod.Klass.method() "


def test_missing_frame_prefix(layout) -> None:
    paths, _, _ = layout
    site = CallSite("", 0, "", ok=False)
    assert format_prefix(Style.PLAIN, site, paths) == "pc[0x0] "
    assert format_prefix(Style.FUNC, site, paths) == "pc[0x0] () "
    assert format_prefix(Style.FILE_LINE, site, paths) == "pc[0x0] :0: "
