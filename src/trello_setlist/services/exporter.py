"""File export for rendered set lists."""

from collections.abc import Callable
from pathlib import Path


class ExportError(Exception):
    """A set list file could not be written."""

    pass


def get_export_paths(output: str | Path) -> tuple[Path, Path]:
    """Derive markdown and HTML paths from an output base path.

    The extension is replaced, or appended when there is none.

    Args:
        output: Output base filename, e.g. ``set_list.md`` or ``gig``.

    Returns:
        Tuple of (markdown_path, html_path).

    Raises:
        ExportError: If the path has no file name.
    """
    output_path = Path(output)
    if not output_path.name or output_path.name in ('.', '..'):
        raise ExportError(f"Output path has no file name: {output}")

    markdown_path = output_path.with_suffix('.md')
    html_path = markdown_path.with_suffix('.html')
    return markdown_path, html_path


def write_file(path: Path, content: str) -> None:
    """Write content to path, creating parent directories.

    Raises:
        ExportError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise ExportError(f"Error writing {path}: {e}") from e


def export_set_list(
    markdown_text: str,
    html_text: str,
    output: str | Path,
    write: Callable[[Path, str], None] = write_file,
    on_written: Callable[[Path], None] | None = None,
) -> tuple[Path, Path]:
    """Write the markdown and HTML set list files.

    The markdown file is written first. If the HTML write fails, the markdown
    file stays on disk.

    Args:
        markdown_text: Rendered markdown.
        html_text: Rendered HTML document.
        output: Output base filename.
        write: Function that writes text to a path.
        on_written: Optional callback invoked with each path after it is written.

    Returns:
        Tuple of (markdown_path, html_path) that were written.

    Raises:
        ExportError: If either file cannot be written.
    """
    markdown_path, html_path = get_export_paths(output)
    for path, content in ((markdown_path, markdown_text), (html_path, html_text)):
        write(path, content)
        if on_written:
            on_written(path)
    return markdown_path, html_path
