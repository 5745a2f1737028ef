#!/usr/bin/env python3
"""Main entry point for Trello set list CLI."""

from trello_setlist.cli.commands import cli

if __name__ == '__main__':
    cli()
