"""Configuration package for the unused file tree analyzer."""

from .models import (
    AppConfig,
    AnalysisConfig,
    ReportConfig,
    LoggingConfig,
    UnusedTreeError,
    ConfigError,
    DiscoveryError,
    PathOutsideRootError,
    ReportWriteError,
    safe_load_dataclass,
)

__all__ = [
    'AppConfig',
    'AnalysisConfig',
    'ReportConfig',
    'LoggingConfig',
    'UnusedTreeError',
    'ConfigError',
    'DiscoveryError',
    'PathOutsideRootError',
    'ReportWriteError',
    'safe_load_dataclass',
]
