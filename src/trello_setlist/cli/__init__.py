"""Command line interface for Trello set lists."""

from trello_setlist.cli.commands import cli

__all__ = ['cli']
