"""CLI command definitions for set list generation."""

from pathlib import Path

import click
from dotenv import load_dotenv

from trello_setlist.services.board import ListNotFoundError, ParseError, count_open_cards, load_board
from trello_setlist.services.exporter import ExportError
from trello_setlist.services.setlist import (
    ConsoleEnvironment,
    InputError,
    SetListOptions,
    run_pipeline,
)
from trello_setlist.services.trello_api import TrelloClient, save_board_export
from trello_setlist.utils.config import (
    DEFAULT_TITLE,
    ConfigError,
    get_config_path,
    load_settings,
)

# Load environment variables
load_dotenv()

config_option = click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Config file (default: trello-setlist.yaml in this or a parent directory)',
)


@click.group()
@click.version_option(package_name='trello-setlist')
def cli() -> None:
    """Trello Set List CLI - Create a printable set list out of a Trello board."""
    pass


@cli.command()
@click.option('--in', '-i', 'input_path', help='Trello JSON file to process')
@click.option('--out', '-o', 'output', help='Output filename')
@click.option('--list', '-l', 'list_name', help='Trello list name')
@click.option('--title', '-t', help='Set list title (prompted if not given)')
@click.option('--date/--no-date', 'include_date', default=None, help='Include the generation date')
@config_option
def build(
    input_path: str | None,
    output: str | None,
    list_name: str | None,
    title: str | None,
    include_date: bool | None,
    config_path: Path | None,
) -> None:
    """Build markdown and HTML set lists from a Trello board export."""
    try:
        settings = load_settings(config_path)
        options = SetListOptions(
            input_path=settings['input'] if input_path is None else input_path,
            output=settings['output'] if output is None else output,
            list_name=settings['list_name'] if list_name is None else list_name,
            title=title if title is not None else settings['title'],
            include_date=settings['include_date'] if include_date is None else include_date,
        )

        run_pipeline(options, ConsoleEnvironment())
        click.echo("Done")
    except (ConfigError, InputError) as e:
        raise click.ClickException(str(e))
    except (ParseError, ListNotFoundError) as e:
        raise click.ClickException(f"Error extracting the set list: {e}")
    except ExportError as e:
        raise click.ClickException(f"Failed exporting set list: {e}")


@cli.command()
@click.option('--in', '-i', 'input_path', help='Trello JSON file to inspect')
@config_option
def lists(input_path: str | None, config_path: Path | None) -> None:
    """Show the lists on an exported board."""
    try:
        settings = load_settings(config_path)
        if input_path is None:
            input_path = settings['input']
        board = load_board(ConsoleEnvironment().read_text(input_path))
        counts = count_open_cards(board)

        click.echo(f"\nLists ({len(board.lists)}):\n")
        for trello_list in board.lists:
            click.echo(f"  {trello_list.id:26} {trello_list.name} ({counts[trello_list.id]} cards)")
        click.echo()
    except (ConfigError, InputError) as e:
        raise click.ClickException(str(e))
    except ParseError as e:
        raise click.ClickException(f"Error reading board: {e}")


@cli.command()
def boards() -> None:
    """List all accessible Trello boards."""
    try:
        client = TrelloClient()
        boards = client.get_boards()

        click.echo(f"\nFound {len(boards)} boards:\n")
        for board in boards:
            click.echo(f"  {board['id']:26} {board['name']}")
        click.echo()
    except ValueError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        raise click.ClickException(f"Error listing boards: {e}")


@cli.command()
@click.argument('board_id')
@click.option('--out', '-o', 'output', help='Output JSON file (default: the configured input file)')
@config_option
def fetch(board_id: str, output: str | None, config_path: Path | None) -> None:
    """Download a board from Trello as JSON.

    Args:
        board_id: The ID of the board to download.
    """
    try:
        settings = load_settings(config_path)
        client = TrelloClient()
        click.echo(f"Fetching board: {board_id}")

        board_data = client.get_board_export(board_id)
        result_path = save_board_export(board_data, settings['input'] if output is None else output)

        click.echo(f"Saved '{board_data.get('name', board_id)}' to {result_path}")
        click.echo(f"  Lists: {len(board_data.get('lists', []))}")
        click.echo(f"  Cards: {len(board_data.get('cards', []))}")
    except (ConfigError, ExportError) as e:
        raise click.ClickException(str(e))
    except ValueError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        raise click.ClickException(f"Error fetching board: {e}")


@cli.command()
@config_option
def config(config_path: Path | None) -> None:
    """Show current configuration."""
    try:
        path = config_path or get_config_path()
        settings = load_settings(path)

        click.echo(f"\nConfiguration file: {path}")
        click.echo(f"Exists: {path.exists()}\n")
        click.echo(f"Input:        {settings['input']}")
        click.echo(f"Output:       {settings['output']}")
        click.echo(f"List name:    {settings['list_name']}")
        click.echo(f"Title:        {settings['title'] or f'(prompted, default: {DEFAULT_TITLE})'}")
        click.echo(f"Include date: {settings['include_date']}")
        click.echo()
    except ConfigError as e:
        raise click.ClickException(str(e))
