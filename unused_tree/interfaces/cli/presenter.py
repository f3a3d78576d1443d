"""CLI presentation layer for the unused file tree analyzer.

This module handles all visual feedback in the CLI using Halo spinners,
subscribes to pipeline events for progress tracking and prints the
colored tree with rich.
"""

import time
from typing import Optional

from halo import Halo
from rich.console import Console

from ...core.renderer import render_report
from ...core.result_types import PipelineResult
from ...utils import format_duration, format_usage, print_error
from ...utils.events import SimpleEmitter


class CLIPresenter:
    """Displays pipeline progress and the final tree in the CLI.

    Subscribes to pipeline events and provides visual feedback:
    - Halo spinners for stages
    - Success messages with per-stage counts
    - The legend and colored tree once the analysis is done

    Example:
        emitter = SimpleEmitter()
        presenter = CLIPresenter()
        presenter.attach_to_pipeline(emitter)

        pipeline = UnusedTreePipeline(config, emitter)
        presenter.show_result(pipeline.run(used_files), config.analysis.only_show_unused)
    """

    def __init__(self, console: Optional[Console] = None, spinners: bool = True):
        """Initialize CLI presenter.

        Args:
            console: Rich console to print the tree to
            spinners: Show Halo spinners for pipeline stages
        """
        self.console = console or Console()
        self.spinners = spinners
        self.current_spinner: Optional[Halo] = None
        self.started_at: Optional[float] = None

    def attach_to_pipeline(self, emitter: SimpleEmitter):
        """Subscribe to pipeline events.

        Args:
            emitter: Event emitter from pipeline
        """
        emitter.on('stage:start', self._on_stage_start)
        emitter.on('stage:complete', self._on_stage_complete)
        emitter.on('stage:failed', self._on_stage_failed)
        emitter.on('report:failed', self._on_report_failed)

    def _on_stage_start(self, stage: str, message: str, **_):
        """Handle stage start event - start spinner."""
        if self.started_at is None:
            self.started_at = time.monotonic()
        if not self.spinners:
            return
        if self.current_spinner:
            self.current_spinner.stop()

        self.current_spinner = Halo(text=message, spinner='dots')
        self.current_spinner.start()

    def _on_stage_complete(self, stage: str, **data):
        """Handle stage completion - show success message."""
        if not self.current_spinner:
            return

        self.current_spinner.succeed(self._format_success_message(stage, data))
        self.current_spinner = None

    def _on_stage_failed(self, stage: Optional[str], error: str, **_):
        """Handle an exception inside a stage - fail the running spinner."""
        if self.current_spinner:
            self.current_spinner.fail(f'{(stage or "pipeline").capitalize()} failed')
            self.current_spinner = None

    def _on_report_failed(self, error: str, **_):
        """Handle report write failure - stop spinner with failure."""
        if self.current_spinner:
            self.current_spinner.fail('Report not written')
            self.current_spinner = None
        print_error(error)

    def _format_success_message(self, stage: str, data: dict) -> str:
        """Format success message based on stage and data.

        Args:
            stage: Stage name
            data: Stage-specific data

        Returns:
            Formatted success message
        """
        if stage == 'scan':
            return f"Scan complete ({data.get('files_count', 0)} files found)"

        if stage == 'usage':
            msg = f"{data.get('files_count', 0)} used files under check path"
            outside = data.get('outside_count', 0)
            if outside:
                msg += f" ({outside} outside ignored)"
            return msg

        if stage == 'build':
            return f"Tree built ({data.get('unused', 0)} of {data.get('total', 0)} files unused)"

        if stage == 'report':
            return f"Report saved: {data.get('path')}"

        return f'{stage.capitalize()} complete'

    def show_result(self, result: PipelineResult, only_show_unused: bool):
        """Print the legend, the colored tree and a summary line."""
        self.console.print(render_report(result.tree.forest, only_show_unused), end='', soft_wrap=True)

        total = len(result.scan.all_files)
        summary = format_usage(total - result.tree.unused_files, total)
        if self.started_at is not None:
            summary += f" in {format_duration(time.monotonic() - self.started_at)}"
        if only_show_unused:
            summary += " (only unused files shown)"
        self.console.print(summary, style='bold')
