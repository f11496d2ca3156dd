import os

from typed_fs.domain.exceptions.domain_exceptions import PathOutsideRootError
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.path_rules import CURRENT_DIRECTORY
from typed_fs.domain.value_objects.relative_path import RelativePath


def resolve_under_root(root: AbsolutePath, path: str | None) -> AbsolutePath:
    """Resolve ``path`` against ``root`` and refuse anything outside of it.

    A rooted ``path`` replaces ``root`` before the check, so ``/etc/passwd``
    is rejected the same way as ``../../etc/passwd``. Containment is checked
    on the real paths, with symlinks followed and the host's case rules, while
    the lexical path is returned.
    """
    target = root + (path or "")
    if not is_within(root, target):
        raise PathOutsideRootError(f"Path traversal not allowed: {path}")
    return target


def is_within(root: AbsolutePath, target: AbsolutePath) -> bool:
    """Check whether ``target`` really lies at or below ``root``."""
    real_root = os.path.normcase(os.path.realpath(root))
    real_target = os.path.normcase(os.path.realpath(target))
    try:
        return os.path.commonpath([real_root, real_target]) == real_root
    except ValueError:
        # different drives
        return False


def relative_to_root(root: AbsolutePath, path: AbsolutePath) -> RelativePath:
    """Path below ``root``, with the root itself mapped to ``RelativePath.EMPTY``."""
    relative = path - root
    if relative == RelativePath(CURRENT_DIRECTORY):
        return RelativePath.EMPTY
    return relative


def resolve_root(path: str) -> AbsolutePath:
    """Absolute root directory for ``path``, relative ones start at the cwd."""
    return AbsolutePath.current_directory() + path
