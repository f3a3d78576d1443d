"""Sources for the list of files a build actually uses.

Two sources are supported: a plain-text manifest with one path per line,
and the import graph of one or more Python entry scripts as seen by
modulefinder.
"""

import logging
import sys
from modulefinder import ModuleFinder
from pathlib import Path
from typing import Iterable, TextIO

from ..config import ConfigError
from .segmenter import is_under_root

logger = logging.getLogger(__name__)


def _absolute(path: str, root: Path) -> str:
    p = Path(path)
    if not p.is_absolute():
        p = root / p
    return Path(p).resolve().as_posix()


def parse_manifest(lines: Iterable[str], root: Path) -> list[str]:
    """Parse manifest lines into absolute '/'-separated paths.

    Blank lines and lines starting with '#' are ignored. Relative entries
    are resolved against root.
    """
    paths = []
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith('#'):
            continue
        paths.append(_absolute(entry, root))
    return paths


def load_used_files(manifest: Path | str, root: Path, stdin: TextIO | None = None) -> list[str]:
    """Read used files from a manifest file, or stdin when manifest is '-'.

    Raises:
        ConfigError: If the manifest does not exist
    """
    if str(manifest) == '-':
        return parse_manifest(stdin or sys.stdin, root)

    path = Path(manifest)
    if not path.is_file():
        raise ConfigError(f"Used files manifest '{path}' not found.")

    with path.open('r', encoding='utf-8') as f:
        return parse_manifest(f, root)


def find_used_modules(entry_scripts: Iterable[Path | str], root: Path) -> list[str]:
    """Collect the entry scripts and every module file they import under root."""
    root_posix = Path(root).resolve().as_posix()
    used = []

    for script in entry_scripts:
        script_path = _absolute(str(script), root)
        if not Path(script_path).is_file():
            raise ConfigError(f"Entry script '{script_path}' not found.")

        # The script's own directory comes first, as it does for the interpreter
        script_dir = Path(script_path).parent.as_posix()
        finder = ModuleFinder(path=[script_dir, root_posix] + sys.path)
        try:
            finder.run_script(script_path)
        except SyntaxError as e:
            logger.warning("Could not analyze imports of %s: %s", script_path, e)
        used.append(script_path)

        for module in finder.modules.values():
            module_file = getattr(module, '__file__', None)
            if not module_file:
                continue
            module_path = Path(module_file).resolve().as_posix()
            if is_under_root(module_path, root_posix):
                used.append(module_path)

    used = merge_used_files(used)
    logger.debug("modulefinder found %d used files under %s", len(used), root_posix)
    return used


def merge_used_files(*sources: Iterable[str]) -> list[str]:
    """Concatenate used file lists, dropping duplicates and keeping order."""
    seen = set()
    merged = []
    for source in sources:
        for p in source:
            if p not in seen:
                seen.add(p)
                merged.append(p)
    return merged
