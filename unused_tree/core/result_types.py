"""Result types for pipeline data transfer between stages."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.text import Text

from .file_tree import FileNode


@dataclass
class ScanResult:
    """Result of scanning the check path."""
    root: str
    all_files: list[str]
    encountered_skip_paths: set[str]
    skipped_files: list[str]


@dataclass
class UsageResult:
    """Used files split by whether they live under the check path."""
    used_files: list[str]
    outside_root: list[str]


@dataclass
class TreeResult:
    """Built and annotated file tree."""
    forest: list[FileNode]
    total_files: int
    used_files: int
    matched_used_paths: int
    unused_files: int


@dataclass
class PipelineResult:
    """Complete result of an unused tree analysis."""
    scan: ScanResult
    usage: UsageResult
    tree: TreeResult
    rendered: Text
    report_path: Optional[Path] = None
    report_error: Optional[Exception] = None

    @property
    def report(self) -> str:
        """Uncolored tree body."""
        return self.rendered.plain
