"""Shared fixtures for xmlimg tests."""

from __future__ import annotations

import base64
import io
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with tmp_path as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_xml(workdir: Path):
    """Write an XML document into the working directory."""

    def _write(name: str, body: str) -> Path:
        path = workdir / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def png_bytes() -> bytes:
    """A small real PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (4, 3), color=(255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_b64(png_bytes: bytes) -> str:
    return base64.b64encode(png_bytes).decode("ascii")
