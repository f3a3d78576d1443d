"""Configuration models for the unused file tree analyzer."""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SKIP_PATHS = ('node_modules',)
DEFAULT_SKIP_FILES = ('type.ts',)
DEFAULT_REPORT_FILE_NAME = 'report.txt'


# --- CUSTOM EXCEPTIONS ---

class UnusedTreeError(Exception):
    """Base exception for unused tree errors."""


class ConfigError(UnusedTreeError):
    """Configuration loading error."""


class DiscoveryError(UnusedTreeError):
    """File discovery under the check path failed."""


class PathOutsideRootError(UnusedTreeError):
    """A path does not live under the analyzed root."""

    def __init__(self, path: str, root: str):
        super().__init__(f"Path '{path}' is outside of root '{root}'.")
        self.path = path
        self.root = root


class ReportWriteError(UnusedTreeError):
    """Writing the report file failed."""


def _as_tuple(value) -> tuple[str, ...]:
    """A single string from YAML means a one-item list."""
    if isinstance(value, str):
        return (value,)
    return tuple(value)


# --- CONFIGURATION DATACLASSES ---

@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for what gets scanned and how the tree is shown."""
    check_path: Path = field(default_factory=Path.cwd)
    only_show_unused: bool = True
    skip_paths: tuple[str, ...] = DEFAULT_SKIP_PATHS
    skip_files: tuple[str, ...] = DEFAULT_SKIP_FILES

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'check_path', Path(self.check_path).resolve())
        merged = list(_as_tuple(self.skip_paths))
        merged.extend(p for p in DEFAULT_SKIP_PATHS if p not in merged)
        object.__setattr__(self, 'skip_paths', tuple(merged))
        object.__setattr__(self, 'skip_files', _as_tuple(self.skip_files))


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for report persistence."""
    need_report: bool = False
    report_path: Path | None = None
    report_file_name: str = DEFAULT_REPORT_FILE_NAME

    def __post_init__(self):
        if self.report_path is not None:
            object.__setattr__(self, 'report_path', Path(self.report_path))


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "INFO"
    log_file: Path | None = None

    def __post_init__(self):
        if self.log_file is not None:
            object.__setattr__(self, 'log_file', Path(self.log_file))


# --- HELPER FUNCTIONS ---

def safe_load_dataclass(dclass_type, data: dict | None, section_name: str):
    """Safely load a dataclass from a dictionary.

    Ignores unknown keys and logs warnings for them.

    Args:
        dclass_type: Dataclass type to instantiate
        data: Dictionary with configuration data (None means defaults)
        section_name: Name of config section (for logging)

    Returns:
        Instance of dclass_type with filtered data

    Raises:
        ConfigError: If the section is not a mapping or has invalid values
    """
    if data is None:
        return dclass_type()
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{section_name}' must be a mapping.")

    valid_keys = {f.name for f in fields(dclass_type)}
    filtered_data = {}

    for k, v in data.items():
        if k in valid_keys:
            if isinstance(v, list):
                v = tuple(v)
            filtered_data[k] = v
        else:
            logger.warning(
                "Config warning: Unknown key '%s' in section '%s' ignored.",
                k, section_name
            )

    try:
        return dclass_type(**filtered_data)
    except TypeError as e:
        raise ConfigError(f"Invalid value in section '{section_name}': {e}") from e


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    analysis: AnalysisConfig
    report: ReportConfig
    logging: LoggingConfig

    @property
    def report_file(self) -> Path:
        """Full path of the report file; defaults to the check path."""
        directory = self.report.report_path or self.analysis.check_path
        return directory / self.report.report_file_name

    @classmethod
    def default(cls, check_path: Path | str | None = None) -> 'AppConfig':
        """Build a configuration with every option at its default."""
        analysis = AnalysisConfig() if check_path is None else AnalysisConfig(check_path=Path(check_path))
        return cls(analysis=analysis, report=ReportConfig(), logging=LoggingConfig())

    @classmethod
    def load(cls, config_path: Path | str) -> 'AppConfig':
        """Load application configuration from a YAML file.

        Args:
            config_path: Path to config.yaml file

        Returns:
            AppConfig instance with loaded configuration

        Raises:
            ConfigError: If file not found or YAML parsing fails
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file '{path}' not found.")

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file '{path}' must contain a mapping.")

        for section in data:
            if section not in ('analysis', 'report', 'logging'):
                logger.warning("Config warning: Unknown section '%s' ignored.", section)

        return cls(
            analysis=safe_load_dataclass(AnalysisConfig, data.get('analysis'), 'analysis'),
            report=safe_load_dataclass(ReportConfig, data.get('report'), 'report'),
            logging=safe_load_dataclass(LoggingConfig, data.get('logging'), 'logging'),
        )

    def with_overrides(
        self,
        check_path: Path | str | None = None,
        only_show_unused: bool | None = None,
        need_report: bool | None = None,
    ) -> 'AppConfig':
        """Return a copy with command-line overrides applied."""
        analysis = self.analysis
        if check_path is not None:
            analysis = replace(analysis, check_path=Path(check_path))
        if only_show_unused is not None:
            analysis = replace(analysis, only_show_unused=only_show_unused)
        report = self.report
        if need_report is not None:
            report = replace(report, need_report=need_report)
        return replace(self, analysis=analysis, report=report)
