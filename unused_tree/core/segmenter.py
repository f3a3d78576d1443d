"""Splitting absolute file paths into root-relative path segments."""

from typing import Iterable

from ..config import PathOutsideRootError

SEPARATOR = '/'


def _root_prefix(root: str) -> str:
    stripped = root.rstrip(SEPARATOR)
    return stripped + SEPARATOR


def is_under_root(path: str, root: str) -> bool:
    """Check whether path lies strictly below root."""
    return path.startswith(_root_prefix(root))


def split_path(path: str, root: str) -> tuple[str, ...]:
    """Return the segments of path relative to root.

    Args:
        path: Absolute path using '/' as separator
        root: Absolute root every path must start with

    Returns:
        Tuple of path segments, e.g. ('src', 'index.js')

    Raises:
        PathOutsideRootError: If path is not below root
    """
    if not is_under_root(path, root):
        raise PathOutsideRootError(path, root)

    segments = path[len(_root_prefix(root)) - 1:].split(SEPARATOR)
    if segments and segments[0] == '':
        segments = segments[1:]
    return tuple(segments)


def segment_paths(paths: Iterable[str], root: str) -> list[tuple[str, ...]]:
    """Apply split_path to every path independently."""
    return [split_path(p, root) for p in paths]


def partition_by_root(paths: Iterable[str], root: str) -> tuple[list[str], list[str]]:
    """Split paths into (inside, outside) of root without raising."""
    inside = []
    outside = []
    for p in paths:
        (inside if is_under_root(p, root) else outside).append(p)
    return inside, outside
