from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' and 'stat' that the walker and the report writer
rely on. Metadata failures are normalized into ``MetadataError`` so the
caller decides whether to skip or abort.
"""

import os
import stat
import tempfile
from typing import List, Tuple

from disk_inventory.domain.errors import MetadataError

# -----------------------------------------------------------------------------
# METADATA API
# -----------------------------------------------------------------------------

def read_entry_metadata(path: str, follow_symlinks: bool = False) -> Tuple[int, bool]:
    """
    Read the size and directory flag of a filesystem entry.

    Symbolic links are reported as themselves unless ``follow_symlinks``
    is set, so a link to a directory is never treated as one.

    Args:
        path: Entry to inspect.
        follow_symlinks: Resolve symbolic links before reading metadata.

    Returns:
        Tuple[int, bool]: (Size in bytes, whether the entry is a directory).

    Raises:
        MetadataError: If the entry cannot be stat-ed.
    """
    try:
        st = os.stat(path) if follow_symlinks else os.lstat(path)
    except OSError as e:
        raise MetadataError(f"Cannot read metadata of '{display_path(path)}': {e}", path=path) from e
    return st.st_size, stat.S_ISDIR(st.st_mode)


def list_directory(path: str) -> List[str]:
    """
    List the entry names of a directory, sorted by name.

    Raises:
        MetadataError: If the directory cannot be opened or read.
    """
    try:
        return sorted(os.listdir(path))
    except OSError as e:
        raise MetadataError(f"Cannot list directory '{display_path(path)}': {e}", path=path) from e

# -----------------------------------------------------------------------------
# PATH PRESENTATION API
# -----------------------------------------------------------------------------

def display_path(path: str) -> str:
    """
    Convert a filesystem path into a printable, UTF-8 safe string.

    Undecodable bytes (kept by Python as lone surrogates) are replaced
    with U+FFFD.
    """
    try:
        return os.fsencode(path).decode("utf-8", errors="replace")
    except UnicodeError:
        return path.encode("utf-8", errors="replace").decode("utf-8")


def entry_name(path: str) -> str:
    """
    Return the last component of a path, or the path itself when it has none.

    "d/" gives "d", while "/", "." and ".." are returned unchanged.
    """
    name = os.path.basename(os.path.normpath(path))
    if not name or name in (os.curdir, os.pardir):
        return path
    return name

# -----------------------------------------------------------------------------
# FILE OUTPUT API
# -----------------------------------------------------------------------------

def write_text_file(path: str, text: str) -> None:
    """
    Replace a file's content atomically.

    The text goes to a temporary file in the destination directory, which
    is then renamed over ``path``. A failed write leaves any previous file
    untouched and removes the temporary file. The parent directory is not
    created. A new file gets the usual umask permissions; an existing one
    keeps its own.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            prefix=".",
            suffix=".tmp",
            dir=directory,
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(text)
        os.chmod(tmp_path, _replacement_mode(path))
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def _replacement_mode(path: str) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
