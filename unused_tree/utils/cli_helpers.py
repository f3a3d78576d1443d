"""CLI helper functions for formatted console output."""

import sys


def print_message(msg: str, icon: str = "", indent: int = 0, stream=None):
    """Base function for printing formatted messages.

    Args:
        msg: Message to display
        icon: Optional icon prefix
        indent: Number of spaces to indent
        stream: Target stream (defaults to stdout)
    """
    prefix = " " * indent
    print(f"{prefix}{icon}{msg}", file=stream or sys.stdout)


def print_error(msg: str, indent: int = 0):
    """Print error message with icon to stderr."""
    print_message(msg, icon="❗️", indent=indent, stream=sys.stderr)


def print_warning(msg: str, indent: int = 0):
    """Print warning message with icon to stderr."""
    print_message(msg, icon="⚠️", indent=indent, stream=sys.stderr)


def print_info(msg: str, indent: int = 2):
    """Print info message with default 2-space indent."""
    print_message(msg, indent=indent)
