"""Directory enumeration and symlink create/remove for the enabled directory.

These are thin wrappers over ``os``; every failure surfaces as ``OSError``
so the session layer can decide what is fatal.
"""

from __future__ import annotations

import errno
import logging
import os

from .paths import StrPath, resolve_link_target

logger = logging.getLogger(__name__)


def list_available(source_dir: StrPath) -> list[str]:
    """Return sorted names of regular files in ``source_dir``.

    Symlinks to files count as files; directories and broken links are
    skipped. Raises ``OSError`` when the directory cannot be read.
    """
    names: list[str] = []
    with os.scandir(source_dir) as entries:
        for entry in entries:
            try:
                is_file = entry.is_file()
            except OSError:
                continue
            if is_file:
                names.append(entry.name)
    names.sort()
    logger.debug("available in %s: %d files", os.fspath(source_dir), len(names))
    return names


def link_points_into(link_path: str, source_real: str) -> bool:
    """Return whether the symlink at ``link_path`` targets a same-named file in ``source_real``.

    Dangling links still count. Only the directory part of the link text is
    resolved, so links made through a symlinked source path still match.
    """
    link_text = os.readlink(link_path)
    pointed = os.path.normpath(os.path.join(os.path.dirname(link_path), link_text))
    return (
        os.path.realpath(os.path.dirname(pointed)) == source_real
        and os.path.basename(pointed) == os.path.basename(link_path)
    )


def list_enabled(source_dir: StrPath, target_dir: StrPath) -> list[str]:
    """Return sorted names of links in ``target_dir`` that point into ``source_dir``.

    Raises ``OSError`` when ``target_dir`` cannot be read.
    """
    source_real = os.path.realpath(source_dir)
    names: list[str] = []
    with os.scandir(target_dir) as entries:
        for entry in entries:
            if not entry.is_symlink():
                continue
            try:
                if link_points_into(entry.path, source_real):
                    names.append(entry.name)
            except OSError as exc:
                logger.warning("cannot read link %s: %s", entry.path, exc)
    names.sort()
    logger.debug("enabled in %s: %s", os.fspath(target_dir), names)
    return names


def create_link(
    source_dir: StrPath,
    target_dir: StrPath,
    name: str,
    link_target: str | None = None,
) -> str:
    """Create ``target_dir/name`` pointing at ``source_dir/name``.

    ``link_target`` is computed with ``resolve_link_target`` when omitted.
    Returns the link text written. Raises ``OSError`` when the link path
    already exists or a directory is missing, ``PathResolutionError`` when
    no link text can be computed.
    """
    if link_target is None:
        link_target = resolve_link_target(source_dir, target_dir, name)
    link_path = os.path.join(target_dir, name)
    os.symlink(link_target, link_path)
    logger.debug("created %s -> %s", link_path, link_target)
    return link_target


def remove_link(target_dir: StrPath, name: str) -> None:
    """Remove the symlink ``target_dir/name``.

    Refuses to delete anything that is not a symlink.
    """
    link_path = os.path.join(target_dir, name)
    if not os.path.islink(link_path):
        if not os.path.lexists(link_path):
            raise FileNotFoundError(errno.ENOENT, "no such link", link_path)
        raise OSError(errno.EINVAL, "not a symlink, refusing to remove", link_path)
    os.unlink(link_path)
    logger.debug("removed %s", link_path)
