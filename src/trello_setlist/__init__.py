"""Trello Set List - Printable set lists from exported Trello boards."""

__version__ = '0.1.0'

from trello_setlist.cli import cli
from trello_setlist.services import run_pipeline

__all__ = ['cli', 'run_pipeline']
