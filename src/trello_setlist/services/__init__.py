"""Services for building set lists from Trello boards."""

from trello_setlist.services.board import (
    Board,
    Card,
    ListNotFoundError,
    ParseError,
    TrelloList,
    get_card_names_on_list,
    get_list_id,
    get_set_list,
    load_board,
)
from trello_setlist.services.exporter import ExportError, export_set_list
from trello_setlist.services.setlist import (
    ConsoleEnvironment,
    Environment,
    InputError,
    SetListOptions,
    run_pipeline,
)
from trello_setlist.services.trello_api import TrelloClient

__all__ = [
    'Board',
    'Card',
    'ConsoleEnvironment',
    'Environment',
    'ExportError',
    'InputError',
    'ListNotFoundError',
    'ParseError',
    'SetListOptions',
    'TrelloClient',
    'TrelloList',
    'export_set_list',
    'get_card_names_on_list',
    'get_list_id',
    'get_set_list',
    'load_board',
    'run_pipeline',
]
