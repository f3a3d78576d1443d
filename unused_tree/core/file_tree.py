"""File tree construction and usage statistics.

Flat lists of path segments are merged into a forest of FileNode objects
(there is no synthetic root node). Counts are filled in by two post-order
passes: one for the number of files below each directory, one for the
number of those files that are used.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

logger = logging.getLogger(__name__)

Segments = Sequence[str]


@dataclass
class FileNode:
    """A directory or file entry in the tree."""
    name: str
    is_dir: bool
    children: Optional[list['FileNode']] = None
    used_count: int = 0
    sub_file_count: int = 0

    @property
    def file_count(self) -> int:
        """Number of files this node stands for (a file counts as one)."""
        return self.sub_file_count if self.is_dir else 1

    def child(self, name: str) -> Optional['FileNode']:
        """Return the direct child called name, if any."""
        return _find(self.children or [], name)


def _find(siblings: list[FileNode], name: str) -> Optional[FileNode]:
    for node in siblings:
        if node.name == name:
            return node
    return None


# --- BUILDING ---

def build_tree(segment_lists: Iterable[Segments]) -> list[FileNode]:
    """Merge segment sequences into a forest, sharing common prefixes.

    Args:
        segment_lists: One sequence of path segments per file

    Returns:
        Top-level nodes in first-seen order
    """
    forest: list[FileNode] = []

    for segments in segment_lists:
        siblings = forest
        last = len(segments) - 1
        for index, name in enumerate(segments):
            node = _find(siblings, name)
            if node is None:
                is_dir = index < last
                node = FileNode(name=name, is_dir=is_dir, children=[] if is_dir else None)
                siblings.append(node)
            if node.children is None:
                # A file cannot have descendants; the rest of the path is dropped.
                if index < last:
                    logger.debug("Path %s collides with file '%s'", '/'.join(segments), name)
                break
            siblings = node.children

    return forest


def filter_unused(all_paths: Iterable[str], used_paths: Iterable[str]) -> list[str]:
    """Drop every path that is present in used_paths, keeping order."""
    used = set(used_paths)
    return [p for p in all_paths if p not in used]


# --- COUNTING ---

def count_sub_files(forest: list[FileNode]) -> int:
    """Fill sub_file_count for every directory, post-order.

    Returns:
        Total number of files in the forest
    """
    total = 0
    for node in forest:
        if node.is_dir:
            node.sub_file_count = count_sub_files(node.children)
        total += node.file_count
    return total


def mark_used(forest: list[FileNode], used_segment_lists: Iterable[Segments]) -> int:
    """Increment used_count on the nodes matched by each used path.

    Only existing nodes are matched; paths that leave the tree are ignored.

    Returns:
        Number of used paths that matched a node
    """
    matched = 0
    for segments in used_segment_lists:
        siblings = forest
        node = None
        for index, name in enumerate(segments):
            node = _find(siblings, name)
            if node is None:
                logger.debug("Used path not in tree: %s", '/'.join(segments))
                break
            if index == len(segments) - 1:
                if not node.is_dir:
                    node.used_count += 1
                    matched += 1
            else:
                siblings = node.children or []
    return matched


def sum_used(forest: list[FileNode]) -> int:
    """Recompute used_count of every directory from its children."""
    total = 0
    for node in forest:
        if node.is_dir:
            node.used_count = sum_used(node.children)
        total += node.used_count
    return total


def apply_usage(forest: list[FileNode], used_segment_lists: Iterable[Segments]) -> int:
    """Mark used files and aggregate the counts upward.

    Returns:
        Number of used paths that matched a node
    """
    matched = mark_used(forest, used_segment_lists)
    sum_used(forest)
    return matched


# --- TRAVERSAL ---

def iter_nodes(forest: list[FileNode]) -> Iterator[tuple[tuple[str, ...], FileNode]]:
    """Yield (segments, node) for every node, pre-order."""
    def walk(nodes, parents):
        for node in nodes:
            path = parents + (node.name,)
            yield path, node
            if node.children:
                yield from walk(node.children, path)

    yield from walk(forest, ())


def find_node(forest: list[FileNode], segments: Segments) -> Optional[FileNode]:
    """Look up the node at the given segment path."""
    siblings = forest
    node = None
    for name in segments:
        node = _find(siblings, name)
        if node is None:
            return None
        siblings = node.children or []
    return node
