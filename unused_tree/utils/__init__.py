"""Utility functions for the unused file tree analyzer."""

from .formatters import format_percent, format_usage, format_duration
from .cli_helpers import print_error, print_warning, print_info

__all__ = [
    'format_percent',
    'format_usage',
    'format_duration',
    'print_error',
    'print_warning',
    'print_info',
]
