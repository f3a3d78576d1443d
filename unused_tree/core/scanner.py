"""Project directory scanning."""

import glob
import logging
from pathlib import Path, PurePosixPath

from ..config import AnalysisConfig, DiscoveryError
from .result_types import ScanResult

logger = logging.getLogger(__name__)

FILE_PATTERN = '**/*.*'


def _matched_skip_path(rel_path: str, skip_paths: tuple[str, ...]) -> str | None:
    parts = PurePosixPath(rel_path).parts
    for skip in skip_paths:
        skip = skip.strip('/')
        if not skip:
            continue
        if rel_path == skip or rel_path.startswith(skip + '/'):
            return skip
        # Bare directory names match at any depth
        if '/' not in skip and skip in parts[:-1]:
            return skip
    return None


def scan_files(cfg: AnalysisConfig) -> ScanResult:
    """Scan the check path and return every non-skipped file.

    Args:
        cfg: Analysis configuration with check path and skip rules

    Returns:
        ScanResult with absolute '/'-separated paths, sorted

    Raises:
        DiscoveryError: If the check path cannot be read
    """
    root = Path(cfg.check_path)
    if not root.is_dir():
        raise DiscoveryError(f"Check path '{root}' is not a directory.")

    try:
        matches = glob.glob(FILE_PATTERN, root_dir=root, recursive=True)
    except OSError as e:
        raise DiscoveryError(f"Failed to scan '{root}': {e}") from e

    skip_files = set(cfg.skip_files)
    root_posix = root.as_posix().rstrip('/')
    encountered_skip_paths = set()
    skipped_files = []
    all_files = []

    for match in sorted(matches):
        rel_path = Path(match).as_posix()
        if not (root / match).is_file():
            continue

        matched_skip = _matched_skip_path(rel_path, cfg.skip_paths)
        if matched_skip:
            encountered_skip_paths.add(matched_skip)
            continue

        if PurePosixPath(rel_path).name in skip_files:
            skipped_files.append(rel_path)
            continue

        all_files.append(f"{root_posix}/{rel_path}")

    logger.debug(
        "Scanned %s: %d files, %d skipped by name, skip paths hit: %s",
        root, len(all_files), len(skipped_files), sorted(encountered_skip_paths)
    )
    return ScanResult(
        root=root_posix,
        all_files=all_files,
        encountered_skip_paths=encountered_skip_paths,
        skipped_files=skipped_files,
    )
