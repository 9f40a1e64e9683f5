from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from ley_markdown.filesystem import read_html, resolve_html_path, write_output


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    return tmp_path.resolve()


def _source(base: Path, name: str = "ley.html", raw: bytes = b"<body></body>") -> Path:
    path = base / name
    path.write_bytes(raw)
    return path


@pytest.mark.parametrize("name", ["ley.html", "ley.HTM", "sub/ley.htm"])
def test_resolve_html_path_accepts_html_sources(workdir: Path, name: str):
    (workdir / "sub").mkdir()
    target = _source(workdir, name)

    assert resolve_html_path(str(target), workdir) == target


def test_resolve_html_path_accepts_relative_paths(workdir: Path, monkeypatch):
    monkeypatch.chdir(workdir)
    target = _source(workdir)

    assert resolve_html_path("ley.html", workdir) == target


def test_resolve_html_path_checks_extension_first(workdir: Path):
    with pytest.raises(ValueError, match="not an HTML file"):
        resolve_html_path(str(workdir / "missing.txt"), workdir)


def test_resolve_html_path_missing_file(workdir: Path):
    with pytest.raises(ValueError, match="does not exist"):
        resolve_html_path(str(workdir / "missing.html"), workdir)


def test_resolve_html_path_rejects_symlinked_file(workdir: Path):
    target = _source(workdir)
    link = workdir / "enlace.html"
    link.symlink_to(target)

    with pytest.raises(ValueError, match="Symlinks"):
        resolve_html_path(str(link), workdir)


def test_resolve_html_path_rejects_symlinked_directory(workdir: Path):
    real = workdir / "real"
    real.mkdir()
    _source(real)
    (workdir / "alias").symlink_to(real, target_is_directory=True)

    with pytest.raises(ValueError, match="Symlinks"):
        resolve_html_path(str(workdir / "alias" / "ley.html"), workdir)


def test_resolve_html_path_rejects_files_outside_base(workdir: Path):
    base = workdir / "base"
    base.mkdir()
    target = _source(workdir)

    with pytest.raises(ValueError, match="outside of the working directory"):
        resolve_html_path(str(target), base)


def test_read_html_returns_raw_bytes(workdir: Path):
    target = _source(workdir, raw="Sección".encode("iso-8859-1"))

    assert read_html(target, max_size=100) == b"Secci\xf3n"


def test_read_html_enforces_size_limit(workdir: Path):
    target = _source(workdir, raw=b"x" * 10)

    assert read_html(target, max_size=10) == b"x" * 10
    with pytest.raises(IOError, match="maximum allowed size of 9 bytes"):
        read_html(target, max_size=9)


def test_read_html_rejects_directory(workdir: Path):
    with pytest.raises(IOError, match="not a regular file"):
        read_html(workdir, max_size=100)


def test_read_html_refuses_to_follow_symlinks(workdir: Path):
    target = _source(workdir)
    link = workdir / "enlace.html"
    link.symlink_to(target)

    with pytest.raises(IOError, match="Error reading"):
        read_html(link, max_size=100)


def test_read_html_missing_file(workdir: Path):
    with pytest.raises(IOError, match="Error reading"):
        read_html(workdir / "missing.html", max_size=100)


def test_write_output_creates_utf8_file(workdir: Path):
    destination = workdir / "ley.md"

    write_output(destination, "## Sección\n")

    assert destination.read_bytes() == "## Sección\n".encode("utf-8")
    assert stat.S_IMODE(destination.stat().st_mode) == 0o644
    assert sorted(path.name for path in workdir.iterdir()) == ["ley.md"]


def test_write_output_preserves_permissions(workdir: Path):
    destination = workdir / "ley.md"
    destination.write_text("viejo", encoding="utf-8")
    os.chmod(destination, 0o600)

    write_output(destination, "nuevo")

    assert destination.read_text(encoding="utf-8") == "nuevo"
    assert stat.S_IMODE(destination.stat().st_mode) == 0o600


def test_write_output_rejects_symlink(workdir: Path):
    real = workdir / "real.md"
    real.write_text("", encoding="utf-8")
    link = workdir / "link.md"
    link.symlink_to(real)

    with pytest.raises(IOError, match="Symlinks"):
        write_output(link, "x")


def test_write_output_reports_missing_directory(workdir: Path):
    with pytest.raises(IOError, match="Error writing"):
        write_output(workdir / "missing" / "ley.md", "x")
