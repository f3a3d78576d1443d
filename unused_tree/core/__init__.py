"""Core logic for unused file tree analysis."""

from .segmenter import split_path, segment_paths, partition_by_root
from .file_tree import (
    FileNode, build_tree, filter_unused, count_sub_files,
    mark_used, sum_used, apply_usage, iter_nodes, find_node,
)
from .renderer import Usage, LEGEND, classify, render_tree, render_report
from .scanner import scan_files
from .used_files import load_used_files, find_used_modules, merge_used_files
from .report import write_report
from .result_types import ScanResult, UsageResult, TreeResult, PipelineResult
from .pipeline import UnusedTreePipeline

__all__ = [
    'split_path',
    'segment_paths',
    'partition_by_root',
    'FileNode',
    'build_tree',
    'filter_unused',
    'count_sub_files',
    'mark_used',
    'sum_used',
    'apply_usage',
    'iter_nodes',
    'find_node',
    'Usage',
    'LEGEND',
    'classify',
    'render_tree',
    'render_report',
    'scan_files',
    'load_used_files',
    'find_used_modules',
    'merge_used_files',
    'write_report',
    'ScanResult',
    'UsageResult',
    'TreeResult',
    'PipelineResult',
    'UnusedTreePipeline',
]
