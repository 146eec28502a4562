"""Relative symlink target computation.

Turns ``(source_dir, target_dir, file_name)`` into the string stored at
``target_dir/file_name`` so the link resolves to ``source_dir/file_name``.
This is path arithmetic only; nothing is read from or written to disk.
"""

from __future__ import annotations

import os

from .errors import PathResolutionError

StrPath = str | os.PathLike


def absolute_directory(path: StrPath) -> str:
    """Return ``path`` as a normalized absolute path string.

    Relative paths are anchored at the current working directory. Symlinks
    in the path are not resolved, only ``.``/``..`` segments are collapsed.
    """
    raw = os.fspath(path)
    if not isinstance(raw, str):
        raise PathResolutionError(f"expected a text path, got {raw!r}")
    if not raw:
        raise PathResolutionError("empty directory path")
    if "\x00" in raw:
        raise PathResolutionError(f"path contains a NUL byte: {raw!r}")
    try:
        return os.path.abspath(raw)
    except OSError as exc:
        # ``abspath`` calls ``os.getcwd`` for relative input.
        raise PathResolutionError(f"cannot make {raw!r} absolute: {exc}") from exc


def _check_file_name(file_name: str) -> None:
    if not file_name or file_name in {".", ".."}:
        raise PathResolutionError(f"invalid file name: {file_name!r}")
    separators = {os.sep, os.altsep} - {None}
    if any(sep in file_name for sep in separators) or "\x00" in file_name:
        raise PathResolutionError(f"file name must be a bare name: {file_name!r}")


def resolve_link_target(source_dir: StrPath, target_dir: StrPath, file_name: str) -> str:
    """Compute the link text for ``target_dir/file_name`` -> ``source_dir/file_name``.

    Both directories may be absolute or relative to the working directory.
    When they normalize to the same directory the bare ``file_name`` is
    returned. Otherwise the result is the relative path from ``target_dir``
    to ``source_dir`` joined with ``file_name``, even for absolute inputs,
    so links keep working when a shared parent directory is moved.

    Raises ``PathResolutionError`` when either directory cannot be made
    absolute or no relative path exists between them.
    """
    _check_file_name(file_name)
    source_abs = absolute_directory(source_dir)
    target_abs = absolute_directory(target_dir)
    if source_abs == target_abs:
        return file_name
    try:
        relative = os.path.relpath(source_abs, target_abs)
    except ValueError as exc:
        # Different drives on Windows have no relative path between them.
        raise PathResolutionError(
            f"no relative path from {target_abs!r} to {source_abs!r}: {exc}"
        ) from exc
    return os.path.join(relative, file_name)
