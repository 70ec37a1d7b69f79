"""Tests for output directories and image writing."""

import os
import stat
from pathlib import Path

import pytest

from xmlimg.storage import (
    DIR_MODE,
    DirectoryError,
    OutputDirectory,
    WriteError,
    ensure_dir,
    is_name_safe,
    target_dir_name,
    write_image,
)


# ---------- target_dir_name ----------
@pytest.mark.parametrize(
    "filename,expected",
    [
        ("catalog.xml", "catalog"),
        ("a/b/report.v2.xml", "report.v2"),
        ("/abs/path/books.XML", "books"),
        ("archive.tar.gz", "archive.tar"),
        ("noext", "noext_images"),
        ("dir.d/noext", "noext_images"),
        (".catalog", ".catalog_images"),
    ],
)
def test_target_dir_name(filename, expected):
    assert target_dir_name(filename) == expected


# ---------- ensure_dir ----------
def test_ensure_dir_creates_with_mode(workdir):
    old_umask = os.umask(0)
    try:
        path = ensure_dir("out", verbose=False)
    finally:
        os.umask(old_umask)
    assert path.is_dir()
    assert stat.S_IMODE(path.stat().st_mode) == DIR_MODE == 0o766


def test_ensure_dir_is_idempotent(workdir):
    (workdir / "out").mkdir()
    (workdir / "out" / "keep.bin").write_bytes(b"x")
    ensure_dir("out", verbose=False)
    assert (workdir / "out" / "keep.bin").read_bytes() == b"x"


def test_ensure_dir_reports_creation(workdir, capsys):
    ensure_dir("out")
    assert "Creating a directory to store images: out" in capsys.readouterr().err


def test_ensure_dir_fails_when_path_is_a_file(workdir):
    (workdir / "out").write_text("not a dir")
    with pytest.raises(DirectoryError):
        ensure_dir("out", verbose=False)


def test_ensure_dir_fails_when_parent_missing(workdir):
    with pytest.raises(DirectoryError):
        ensure_dir(workdir / "missing" / "out", verbose=False)


# ---------- OutputDirectory ----------
def test_output_directory_is_lazy_and_memoized(workdir, monkeypatch):
    calls = []
    import xmlimg.storage.dirs as dirs

    real = dirs.ensure_dir

    def counting(path, *, verbose=True):
        calls.append(path)
        return real(path, verbose=verbose)

    monkeypatch.setattr(dirs, "ensure_dir", counting)

    out = OutputDirectory("sub/cat.xml", verbose=False)
    assert not out.created
    assert not (workdir / "cat").exists()

    assert out.path() == Path(".") / "cat"
    assert out.path() == Path(".") / "cat"
    assert out.created
    assert len(calls) == 1
    assert (workdir / "cat").is_dir()


def test_output_directory_uses_root(workdir):
    (workdir / "images").mkdir()
    out = OutputDirectory("cat.xml", "images", verbose=False)
    assert out.path() == Path("images") / "cat"
    assert (workdir / "images" / "cat").is_dir()


# ---------- write_image ----------
def test_write_image_writes_all_bytes(workdir):
    assert write_image("img.bin", b"hello", verbose=False) == 5
    assert (workdir / "img.bin").read_bytes() == b"hello"


def test_write_image_truncates_existing(workdir):
    (workdir / "img.bin").write_bytes(b"a much longer previous content")
    write_image("img.bin", b"new", verbose=False)
    assert (workdir / "img.bin").read_bytes() == b"new"


def test_write_image_empty(workdir):
    assert write_image("empty.bin", b"", verbose=False) == 0
    assert (workdir / "empty.bin").read_bytes() == b""


def test_write_image_progress_line(workdir, capsys):
    write_image("img.bin", b"hello", detail="png, 4x3")
    assert "[written] img.bin (png, 4x3, 5 bytes)" in capsys.readouterr().err


def test_write_image_missing_directory_is_fatal(workdir):
    with pytest.raises(WriteError):
        write_image(workdir / "nope" / "img.bin", b"hello", verbose=False)


def test_write_image_short_write_is_fatal(workdir, monkeypatch):
    import builtins

    import xmlimg.storage.files as files

    real_open = builtins.open

    class ShortFile:
        def __init__(self, f):
            self._f = f

        def write(self, data):
            return self._f.write(data[:-1])

        def __enter__(self):
            return self

        def __exit__(self, *args):
            self._f.close()

    def fake_open(path, mode="r", *args, **kwargs):
        return ShortFile(real_open(path, mode, *args, **kwargs))

    monkeypatch.setattr(files, "open", fake_open, raising=False)
    with pytest.raises(WriteError, match="Short write"):
        write_image("img.bin", b"hello", verbose=False)


# ---------- is_name_safe ----------
@pytest.mark.parametrize(
    "name,safe",
    [
        ("cover.png", True),
        ("img_0001", True),
        ("covers/front.jpg", True),
        ("", False),
        ("   ", False),
        ("../evil.png", False),
        ("a/../../evil.png", False),
        ("/etc/passwd", False),
        ("a:b.png", True),
        ("cover:v2.png", True),
    ],
)
def test_is_name_safe(name, safe):
    assert is_name_safe(name) is safe
