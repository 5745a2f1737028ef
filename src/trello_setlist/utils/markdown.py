"""Markdown and HTML generation for set lists."""

import html
from collections.abc import Sequence
from datetime import date

import markdown

from trello_setlist.utils.formatting import (
    format_generated_date,
    format_set_list_item,
)

FONT_FAMILY = "'Segoe UI', Tahoma, Geneva, Verdana, sans-serif"

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
h2   {{font-family:{font};}}
p    {{font-family:{font};}}
li   {{font-family:{font};}}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def render_markdown(
    names: Sequence[str],
    title: str,
    generated_on: date | None = None,
) -> str:
    """Generate set list markdown.

    Args:
        names: Ordered card names.
        title: Heading for the set list.
        generated_on: Date shown under the heading. Omitted when None.

    Returns:
        Markdown content as a string.
    """
    # Python-Markdown strips a trailing '#' run from headings
    heading = title.replace('#', '\\#')
    lines = [f'## {heading}', '']
    if generated_on is not None:
        lines.append(f'_Generated on {format_generated_date(generated_on)}_')
        lines.append('')

    content = '\n'.join(lines) + '\n'
    for index, name in enumerate(names, 1):
        content += format_set_list_item(index, name) + '\n'
    return content


def markdown_to_html(markdown_text: str) -> str:
    """Convert markdown text to an HTML fragment."""
    return markdown.markdown(markdown_text, extensions=['sane_lists'], output_format='html')


def render_html(markdown_text: str, title: str) -> str:
    """Generate a self-contained HTML document from set list markdown.

    Args:
        markdown_text: Markdown produced by render_markdown.
        title: Document title.

    Returns:
        HTML document with an embedded stylesheet.
    """
    return HTML_TEMPLATE.format(
        title=html.escape(title),
        font=FONT_FAMILY,
        body=markdown_to_html(markdown_text),
    )
