"""Command line interface."""

from .app import main
from .presenter import CLIPresenter

__all__ = ['main', 'CLIPresenter']
