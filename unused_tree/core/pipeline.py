"""Event-driven pipeline for unused file analysis.

This pipeline orchestrates the flow from a project directory and a list of
used files to a rendered usage tree, emitting events at each stage for
progress tracking and presentation.
"""

import logging
from typing import Iterable, Optional

from ..config import AppConfig, ReportWriteError
from ..utils.events import SimpleEmitter
from .file_tree import apply_usage, build_tree, count_sub_files, filter_unused
from .renderer import render_tree
from .report import write_report
from .result_types import PipelineResult, ScanResult, TreeResult, UsageResult
from .scanner import scan_files
from .segmenter import partition_by_root, segment_paths
from .used_files import merge_used_files

logger = logging.getLogger(__name__)


class UnusedTreePipeline:
    """Event-driven pipeline for unused file analysis.

    The pipeline runs the following stages:
    1. Scan - Discover all files under the check path
    2. Usage - Split used files by check path
    3. Build - Build the file tree and fill in counts
    4. Render - Render the annotated tree
    5. Report - Write the report file (only when enabled)

    Events are emitted at each stage for progress tracking:
    - 'stage:start' - Stage beginning
    - 'stage:complete' - Stage completion
    - 'stage:failed' - Stage raised; the exception is re-raised
    - 'report:failed' - Report could not be written

    Example:
        emitter = SimpleEmitter()
        emitter.on('stage:start', lambda **kw: print(f"Starting {kw['stage']}"))

        pipeline = UnusedTreePipeline(config, emitter)
        result = pipeline.run(used_files)
    """

    def __init__(self, config: AppConfig, emitter: Optional[SimpleEmitter] = None):
        """Initialize pipeline with configuration and optional event emitter.

        Args:
            config: Application configuration
            emitter: Event emitter for progress tracking (optional, defaults to silent)
        """
        self.config = config
        self.emitter = emitter or SimpleEmitter()
        self.current_stage: Optional[str] = None

    def run(self, used_files: Iterable[str]) -> PipelineResult:
        """Execute the complete analysis.

        Args:
            used_files: Absolute paths of the files the build uses

        Returns:
            PipelineResult with all stage results

        Raises:
            DiscoveryError: If scanning the check path fails
        """
        try:
            return self._run_stages(used_files)
        except Exception as e:
            self.emitter.emit('stage:failed', stage=self.current_stage, error=str(e))
            raise

    def _start_stage(self, stage: str, message: str) -> None:
        self.current_stage = stage
        self.emitter.emit('stage:start', stage=stage, message=message)

    def _run_stages(self, used_files: Iterable[str]) -> PipelineResult:
        cfg = self.config.analysis

        # Stage 1: Scan; nothing else runs if this fails
        self._start_stage('scan', f'Scanning {cfg.check_path}...')
        scan_result = scan_files(cfg)
        self.emitter.emit('stage:complete', stage='scan', files_count=len(scan_result.all_files))

        # Stage 2: Used files
        self._start_stage('usage', 'Resolving used files...')
        usage_result = self._resolve_usage(scan_result, used_files)
        self.emitter.emit('stage:complete', stage='usage',
                          files_count=len(usage_result.used_files),
                          outside_count=len(usage_result.outside_root))

        # Stage 3: Build tree
        self._start_stage('build', 'Building file tree...')
        tree_result = self._build(scan_result, usage_result)
        self.emitter.emit('stage:complete', stage='build',
                          total=len(scan_result.all_files), unused=tree_result.unused_files)

        # Stage 4: Render
        self._start_stage('render', 'Rendering tree...')
        rendered = render_tree(tree_result.forest, cfg.only_show_unused)
        self.emitter.emit('stage:complete', stage='render')

        result = PipelineResult(
            scan=scan_result,
            usage=usage_result,
            tree=tree_result,
            rendered=rendered,
        )

        # Stage 5: Report
        if self.config.report.need_report:
            self._write_report(result)

        return result

    def _resolve_usage(self, scan: ScanResult, used_files: Iterable[str]) -> UsageResult:
        """Stage 2: Deduplicate used files and keep those under the check path."""
        inside, outside = partition_by_root(merge_used_files(used_files), scan.root)
        if outside:
            logger.debug("Ignoring %d used files outside %s", len(outside), scan.root)
        return UsageResult(used_files=inside, outside_root=outside)

    def _build(self, scan: ScanResult, usage: UsageResult) -> TreeResult:
        """Stage 3: Build tree, count files, aggregate usage."""
        unused_paths = filter_unused(scan.all_files, usage.used_files)
        tree_paths = unused_paths if self.config.analysis.only_show_unused else scan.all_files

        forest = build_tree(segment_paths(tree_paths, scan.root))
        total = count_sub_files(forest)
        matched = apply_usage(forest, segment_paths(usage.used_files, scan.root))
        used = sum(node.used_count for node in forest)

        logger.debug("Tree built: %d files, %d used, %d used paths matched", total, used, matched)
        return TreeResult(
            forest=forest,
            total_files=total,
            used_files=used,
            matched_used_paths=matched,
            unused_files=len(unused_paths),
        )

    def _write_report(self, result: PipelineResult) -> None:
        """Stage 5: Write the report; a failure leaves the result intact."""
        report_file = self.config.report_file
        self._start_stage('report', 'Writing report...')
        try:
            result.report_path = write_report(report_file, result.scan.root, result.report)
        except ReportWriteError as e:
            logger.debug("Report write failed: %s", e)
            result.report_error = e
            self.emitter.emit('report:failed', error=str(e))
            return
        self.emitter.emit('stage:complete', stage='report', path=str(result.report_path))
