"""Formatting utilities for presenting data."""


def format_percent(part: int, total: int) -> str:
    """Format a ratio as a percentage.

    - (1, 3) -> '33%'
    - (0, 0) -> '0%'
    """
    if total <= 0:
        return "0%"
    return f"{part * 100 / total:.0f}%"


def format_usage(used: int, total: int) -> str:
    """Format used/total file counts for display.

    Example: (3, 4) -> '3/4 files used (75%)'
    """
    return f"{used}/{total} files used ({format_percent(used, total)})"


def format_duration(seconds: float) -> str:
    """Format duration for display.

    Converts seconds to human-readable format:
    - 147.5 -> '2m 27s'
    - 45 -> '45s'
    - 0.25 -> '0.25s'

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string representation
    """
    if seconds < 1:
        return f"{seconds:.2f}s"
    m, s = divmod(int(seconds), 60)
    if m > 0:
        return f"{m}m {s}s"
    return f"{s}s"
