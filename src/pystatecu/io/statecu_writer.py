"""
StateCU file line-writing utilities.

Mirrors ``statecu_reader.py`` on the output side: every ``io/`` writer
should import helpers from this module rather than defining its own copy.

Canonical helpers
-----------------
- ``ensure_parent_dir`` -- create parent directories for an output path
- ``open_for_write``    -- open an output file, reporting failures by path
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from pystatecu.core.exceptions import StateCUWriteError


def ensure_parent_dir(filepath: Path) -> None:
    """Create parent directories for *filepath* if they do not exist.

    Parameters
    ----------
    filepath : Path
        Target file path whose parent directory tree will be created.
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)


@contextmanager
def open_for_write(filepath: Path | str) -> Iterator[TextIO]:
    """Open *filepath* for writing.

    The file is always closed. Any ``OSError`` while creating or writing
    it is raised as a single :class:`StateCUWriteError` naming the path.
    """
    filepath = Path(filepath)
    try:
        ensure_parent_dir(filepath)
        with open(filepath, "w", newline="\n") as f:
            yield f
    except OSError as exc:
        raise StateCUWriteError(f"Unable to write file ({exc.strerror or exc})", filepath) from exc
