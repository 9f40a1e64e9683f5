"""Reading HTML sources and writing Markdown output."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .constants import HTML_EXTENSIONS

# Opening a symlink with this flag fails instead of following it
_NOFOLLOW = getattr(os, "O_NOFOLLOW", 0)


def resolve_html_path(raw_path: str, base_dir: Path) -> Path:
    """Turn a user-supplied path into the absolute path of an HTML source.

    The path must name an existing ``.html``/``.htm`` file inside `base_dir`
    and must not pass through a symlink: a path whose resolved form differs
    from its lexical absolute form is rejected.

    Args:
        raw_path: Absolute or relative path to the document.
        base_dir: Resolved working directory the document must live in.

    Returns:
        Path: Resolved path to the document.

    Raises:
        ValueError: If any of the conditions above does not hold.

    Examples:
        resolve_html_path("leyes/lo-3-2018.html", Path.cwd().resolve())
    """
    path = Path(raw_path).expanduser()
    if path.suffix.lower() not in HTML_EXTENSIONS:
        raise ValueError(
            f"{path} is not an HTML file (expected one of: {', '.join(HTML_EXTENSIONS)})."
        )

    absolute = Path(os.path.abspath(path))
    try:
        resolved = absolute.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Cannot resolve {path}: {error}") from error

    if resolved != absolute:
        raise ValueError(f"Symlinks are not supported: {path} points to {resolved}.")
    if not resolved.is_relative_to(base_dir):
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.")
    return resolved


def read_html(filepath: Path, max_size: int) -> bytes:
    """Read the raw bytes of an HTML source.

    The file is opened without following symlinks and checked through its
    open descriptor, so the checks and the read see the same file. Decoding is
    left to the HTML layer.

    Raises:
        IOError: If the file cannot be opened, is not a regular file, or holds
            more than `max_size` bytes.

    Examples:
        raw = read_html(Path("ley.html"), max_size=1024 * 1024)
    """
    try:
        descriptor = os.open(filepath, os.O_RDONLY | _NOFOLLOW)
    except OSError as error:
        raise IOError(f"Error reading {filepath}: {error}") from error

    if not stat.S_ISREG(os.fstat(descriptor).st_mode):
        os.close(descriptor)
        raise IOError(f"{filepath} is not a regular file.")

    try:
        with os.fdopen(descriptor, "rb") as handle:
            content = handle.read(max_size + 1)
    except OSError as error:
        raise IOError(f"Error reading {filepath}: {error}") from error

    if len(content) > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")
    return content


def write_output(filepath: Path, content: str):
    """Write Markdown output atomically.

    The content goes to a temporary file in the target directory, which then
    replaces `filepath`, so readers never observe a partially written file.
    An existing destination keeps its permission bits.

    Args:
        filepath: Destination path.
        content: Markdown text, written as UTF-8.

    Raises:
        IOError: If the destination is a symlink or cannot be written.

    Examples:
        write_output(Path("ley.md"), markdown)
    """
    if filepath.is_symlink():
        raise IOError(f"Symlinks are not supported: {filepath}.")

    permissions = stat.S_IMODE(filepath.stat().st_mode) if filepath.exists() else 0o644

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", delete=False, dir=filepath.parent, suffix=".tmp"
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.chmod(temp_path, permissions)
        os.replace(temp_path, filepath)
    except OSError as error:
        raise IOError(f"Error writing {filepath}: {error}") from error
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
