"""Formatting utility functions for set list items and dates."""

from datetime import date

METADATA_DELIMITER = ' - '


def format_set_list_item(index: int, name: str) -> str:
    """Format a single numbered set list line.

    Metadata such as capo or tuning info is bolded when the name holds exactly
    one ``" - "`` delimiter. Any other name is kept verbatim.

    Args:
        index: 1-based position in the set list.
        name: The card name.

    Returns:
        Markdown list line without a trailing newline.
    """
    parts = name.split(METADATA_DELIMITER)
    if len(parts) == 2:
        song, metadata = parts
        return f"  {index}. {song}{METADATA_DELIMITER}**{metadata}**"
    return f"  {index}. {name}"


def format_generated_date(day: date) -> str:
    """Format a date as YYYY-MM-DD.

    Args:
        day: The date to format.

    Returns:
        Zero-padded ISO date string.
    """
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"
