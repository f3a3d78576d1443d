"""Command line entry point for the unused file tree analyzer."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console

from ...config import AppConfig, ConfigError, UnusedTreeError
from ...core.pipeline import UnusedTreePipeline
from ...core.used_files import find_used_modules, load_used_files, merge_used_files
from ...utils import print_error, print_warning
from ...utils.events import SimpleEmitter
from .presenter import CLIPresenter

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "config.yaml"
CONFIG_ENV_VAR = "UNUSED_TREE_CONFIG"


def setup_logging(config_log_level: str, log_file: Optional[Path] = None) -> None:
    """Configure logging with console and optional file handlers."""
    log_level = getattr(logging, config_log_level.upper(), logging.INFO)
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(funcName)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(funcName)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if log_file is not None else log_level,
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="unused-tree",
        description="Show which files under a project root are used by a build.",
    )
    parser.add_argument("--config", type=Path, default=None,
                        help=f"YAML config file (default: ${CONFIG_ENV_VAR} or ./{DEFAULT_CONFIG_FILENAME})")
    parser.add_argument("--check-path", type=Path, default=None,
                        help="Project root to scan (overrides config)")
    parser.add_argument("--used-files", default=None,
                        help="Manifest with one used file path per line ('-' for stdin)")
    parser.add_argument("--entry", action="append", default=[], metavar="SCRIPT",
                        help="Python entry script whose imports count as used (repeatable)")
    parser.add_argument("--all", dest="only_show_unused", action="store_false", default=None,
                        help="Show the full tree instead of unused files only")
    parser.add_argument("--report", dest="need_report", action="store_true", default=None,
                        help="Write the report file")
    parser.add_argument("--no-color", action="store_true",
                        help="Print the tree without colors")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not show progress spinners")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load config from --config, the environment or ./config.yaml, then apply flags."""
    config_path = args.config or os.getenv(CONFIG_ENV_VAR)
    if config_path:
        config = AppConfig.load(config_path)
    elif Path(DEFAULT_CONFIG_FILENAME).exists():
        config = AppConfig.load(DEFAULT_CONFIG_FILENAME)
    else:
        config = AppConfig.default()

    return config.with_overrides(
        check_path=args.check_path,
        only_show_unused=args.only_show_unused,
        need_report=args.need_report,
    )


def collect_used_files(args: argparse.Namespace, config: AppConfig) -> list[str]:
    """Gather used files from the manifest and entry scripts."""
    root = config.analysis.check_path
    if not args.used_files and not args.entry:
        raise ConfigError("No used files given: pass --used-files and/or --entry.")

    sources = []
    if args.used_files:
        sources.append(load_used_files(args.used_files, root))
    if args.entry:
        sources.append(find_used_modules(args.entry, root))
    return merge_used_files(*sources)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the unused file tree analyzer."""
    args = build_parser().parse_args(argv)
    try:
        load_dotenv()
        config = load_config(args)
        setup_logging(config.logging.level, config.logging.log_file)

        used_files = collect_used_files(args, config)

        emitter = SimpleEmitter()
        presenter = CLIPresenter(
            console=Console(no_color=args.no_color),
            spinners=not args.quiet,
        )
        presenter.attach_to_pipeline(emitter)

        result = UnusedTreePipeline(config, emitter).run(used_files)
        presenter.show_result(result, config.analysis.only_show_unused)

        if result.report_error is not None:
            print_warning("Tree shown above, but the report file was not written.")
            return 1

    except UnusedTreeError as e:
        print_error(f"Error: {e}")
        return 1
    except Exception as e:
        print_error(f"Unexpected Error: {e}")
        logger.debug("Unexpected error occurred", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
