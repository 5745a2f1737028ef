"""Set list pipeline: board file in, markdown and HTML files out."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import click

from trello_setlist.services.board import Board, get_set_list, load_board
from trello_setlist.services.exporter import export_set_list, write_file
from trello_setlist.utils.config import DEFAULT_TITLE
from trello_setlist.utils.markdown import render_html, render_markdown


class InputError(Exception):
    """The board file could not be read."""

    pass


@dataclass(frozen=True)
class SetListOptions:
    """Resolved options for one pipeline run.

    A title of None means the environment is asked for one.
    """

    input_path: str
    output: str
    list_name: str
    title: str | None = None
    include_date: bool = True


class Environment(ABC):
    """Every side effect the pipeline performs.

    Subclasses decide where paths, prompts, files and messages go.
    """

    @abstractmethod
    def path_exists(self, path: str) -> bool:
        """Check whether a path exists."""
        pass

    @abstractmethod
    def prompt_path(self) -> str:
        """Ask the user for a board file path."""
        pass

    @abstractmethod
    def prompt_title(self, default: str) -> str:
        """Ask the user for a set list title."""
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a text file."""
        pass

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write a text file."""
        pass

    @abstractmethod
    def echo(self, message: str) -> None:
        """Report a progress message."""
        pass

    @abstractmethod
    def today(self) -> date:
        """Get the current date."""
        pass


class ConsoleEnvironment(Environment):
    """Environment backed by the terminal and the local filesystem."""

    def path_exists(self, path: str) -> bool:
        return Path(path).exists()

    def prompt_path(self) -> str:
        # click raises Abort on Ctrl+C
        return click.prompt('Path to JSON file (Ctrl+C to quit)').strip()

    def prompt_title(self, default: str) -> str:
        return click.prompt('Set list title', default=default)

    def read_text(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Error reading JSON file: {e}") from e

    def write_text(self, path: Path, content: str) -> None:
        write_file(path, content)

    def echo(self, message: str) -> None:
        click.echo(message)

    def today(self) -> date:
        return date.today()


def resolve_input_path(path: str, env: Environment) -> str:
    """Prompt until the input path exists.

    Args:
        path: The configured input path.
        env: Environment used for existence checks and prompting.

    Returns:
        A path that exists.
    """
    while not env.path_exists(path):
        env.echo(f"{path} not found")
        path = env.prompt_path()
    return path


def render_documents(
    names: list[str],
    title: str,
    generated_on: date | None = None,
) -> tuple[str, str]:
    """Render set list names as markdown and HTML.

    Returns:
        Tuple of (markdown_text, html_text).
    """
    markdown_text = render_markdown(names, title, generated_on)
    return markdown_text, render_html(markdown_text, title)


def build_documents(
    board: Board,
    list_name: str,
    title: str,
    generated_on: date | None = None,
) -> tuple[str, str]:
    """Render the set list for list_name as markdown and HTML.

    Returns:
        Tuple of (markdown_text, html_text).

    Raises:
        ListNotFoundError: If the board has no list named list_name.
    """
    return render_documents(get_set_list(board, list_name), title, generated_on)


def run_pipeline(options: SetListOptions, env: Environment) -> tuple[Path, Path]:
    """Load a board file, extract the set list and export it.

    The title prompt only happens once the set list has been extracted.

    Args:
        options: Resolved run options.
        env: Environment that performs all I/O.

    Returns:
        Tuple of (markdown_path, html_path) that were written.

    Raises:
        InputError: If the board file cannot be read.
        ParseError: If the board file is not a valid board export.
        ListNotFoundError: If the target list is absent.
        ExportError: If an output file cannot be written.
    """
    input_path = resolve_input_path(options.input_path, env)

    env.echo(f"Loading Trello data from '{input_path}'")
    board = load_board(env.read_text(input_path))
    names = get_set_list(board, options.list_name)

    title = options.title if options.title is not None else env.prompt_title(DEFAULT_TITLE)
    generated_on = env.today() if options.include_date else None
    markdown_text, html_text = render_documents(names, title, generated_on)

    return export_set_list(
        markdown_text,
        html_text,
        options.output,
        write=env.write_text,
        on_written=lambda path: env.echo(f"Exported to {path}"),
    )
