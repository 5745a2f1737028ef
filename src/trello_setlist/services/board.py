"""Trello board model and set list extraction."""

import json
from dataclasses import dataclass
from typing import Any


class ParseError(Exception):
    """Board JSON is malformed or does not match the expected shape."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ListNotFoundError(Exception):
    """No list on the board has the requested name."""

    pass


@dataclass(frozen=True)
class TrelloList:
    """A list (column) on a Trello board."""

    id: str
    name: str


@dataclass(frozen=True)
class Card:
    """A Trello card. Closed cards are archived."""

    id_list: str
    name: str
    closed: bool


@dataclass(frozen=True)
class Board:
    """The part of a Trello board export used for set lists."""

    lists: tuple[TrelloList, ...]
    cards: tuple[Card, ...]


def _check_fields(
    item: Any,
    label: str,
    fields: dict[str, type],
    errors: list[str],
) -> bool:
    """Append a message to errors for every missing or mistyped field."""
    if not isinstance(item, dict):
        errors.append(f"{label} must be an object")
        return False

    valid = True
    for field, expected in fields.items():
        if field not in item:
            errors.append(f"{label} missing required field '{field}'")
            valid = False
        elif not isinstance(item[field], expected):
            errors.append(f"{label} '{field}' must be a {expected.__name__}")
            valid = False
    return valid


def board_from_dict(data: Any) -> Board:
    """Build a Board from decoded board JSON.

    Args:
        data: Decoded JSON document.

    Returns:
        The validated Board.

    Raises:
        ParseError: If the document does not match the board shape. Every
            violation is listed in the error.
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        raise ParseError("Board JSON must be an object", ["Board JSON must be an object"])

    for key in ('lists', 'cards'):
        if key not in data:
            errors.append(f"Board missing required field '{key}'")
        elif not isinstance(data[key], list):
            errors.append(f"Board '{key}' must be an array")

    lists: list[TrelloList] = []
    for i, item in enumerate(data.get('lists') if isinstance(data.get('lists'), list) else []):
        if _check_fields(item, f"List {i}", {'id': str, 'name': str}, errors):
            lists.append(TrelloList(id=item['id'], name=item['name']))

    cards: list[Card] = []
    card_fields = {'idList': str, 'name': str, 'closed': bool}
    for i, item in enumerate(data.get('cards') if isinstance(data.get('cards'), list) else []):
        if _check_fields(item, f"Card {i}", card_fields, errors):
            cards.append(Card(id_list=item['idList'], name=item['name'], closed=item['closed']))

    if errors:
        raise ParseError("Invalid board JSON: " + '; '.join(errors), errors)

    return Board(lists=tuple(lists), cards=tuple(cards))


def load_board(text: str) -> Board:
    """Parse board JSON text.

    Args:
        text: Raw JSON document.

    Returns:
        The validated Board.

    Raises:
        ParseError: If the text is not valid JSON or not a board.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", [str(e)]) from e
    return board_from_dict(data)


def get_list_id(board: Board, list_name: str) -> str:
    """Find the ID of the first list named list_name.

    Raises:
        ListNotFoundError: If no list has that exact name.
    """
    for trello_list in board.lists:
        if trello_list.name == list_name:
            return trello_list.id
    raise ListNotFoundError(f"Couldn't find list named '{list_name}'")


def get_card_names_on_list(board: Board, list_id: str) -> list[str]:
    """Get names of open cards on a list, in board order."""
    return [
        card.name
        for card in board.cards
        if card.id_list == list_id and not card.closed
    ]


def get_set_list(board: Board, list_name: str) -> list[str]:
    """Get the set list for the list named list_name."""
    return get_card_names_on_list(board, get_list_id(board, list_name))


def count_open_cards(board: Board) -> dict[str, int]:
    """Count open cards per list ID."""
    counts = {trello_list.id: 0 for trello_list in board.lists}
    for card in board.cards:
        if not card.closed:
            counts[card.id_list] = counts.get(card.id_list, 0) + 1
    return counts
