"""Separator and root handling shared by the path value objects.

Rootedness and resolution follow the host OS (``os.path``), so ``C:\\x`` is
absolute on Windows and relative elsewhere. Both ``/`` and ``\\`` are accepted
as separators on every platform and rewritten to ``os.sep`` before any other
rule runs.
"""

import os

SEPARATOR = os.sep
EXTENSION_SEPARATOR = "."
CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."


def normalize_separators(path: str) -> str:
    """Rewrite both separator characters to the platform separator."""
    return path.replace("\\", SEPARATOR).replace("/", SEPARATOR)


def collapse_separators(path: str) -> str:
    """Collapse runs of separators into a single one."""
    double = SEPARATOR * 2
    while double in path:
        path = path.replace(double, SEPARATOR)
    return path


def is_rooted(path: str) -> bool:
    """Return True when ``path`` is anchored to a drive or a root separator."""
    drive, rest = os.path.splitdrive(normalize_separators(path))
    return bool(drive) or rest.startswith(SEPARATOR)


def path_root(path: str) -> str:
    """Return the root component of ``path`` (``/``, ``C:\\`` or a UNC share)."""
    drive, rest = os.path.splitdrive(path)
    if rest.startswith(SEPARATOR):
        return drive + SEPARATOR
    return drive


def split_segments(path: str) -> tuple[str, ...]:
    return tuple(s for s in normalize_separators(path).split(SEPARATOR) if s)


def split_extension(name: str) -> tuple[str, str]:
    """Split a file name into stem and dotted extension.

    A trailing lone dot is not an extension, and neither is the leading dot of
    a hidden file such as ``.bashrc``.
    """
    stem, ext = os.path.splitext(name)
    if ext == EXTENSION_SEPARATOR:
        return stem, ""
    return stem, ext


def change_extension(path: str, extension: str) -> str:
    """Replace the extension of the last segment of ``path``.

    ``extension`` is a dotted extension or empty to remove it.
    """
    if not path:
        return path
    head, name = os.path.split(path)
    if not name:
        # a root such as "/" takes the extension as its file name
        return path + extension
    stem, _ = split_extension(name)
    return os.path.join(head, stem + extension) if head else stem + extension
