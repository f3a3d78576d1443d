"""Report which files under a project root are used by a build."""

__version__ = "0.1.0"
