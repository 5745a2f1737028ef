"""Utility functions for set list generation."""

from trello_setlist.utils.config import (
    ConfigError,
    get_config_path,
    get_credentials,
    load_config,
    load_settings,
    validate_config,
)
from trello_setlist.utils.formatting import (
    format_generated_date,
    format_set_list_item,
)
from trello_setlist.utils.markdown import (
    markdown_to_html,
    render_html,
    render_markdown,
)

__all__ = [
    'ConfigError',
    'format_generated_date',
    'format_set_list_item',
    'get_config_path',
    'get_credentials',
    'load_config',
    'load_settings',
    'markdown_to_html',
    'render_html',
    'render_markdown',
    'validate_config',
]
