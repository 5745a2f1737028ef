"""Tests for the board model and set list extraction."""

import json
from typing import Any

import pytest

from trello_setlist.services.board import (
    Board,
    Card,
    ListNotFoundError,
    ParseError,
    TrelloList,
    board_from_dict,
    count_open_cards,
    get_card_names_on_list,
    get_list_id,
    get_set_list,
    load_board,
)


def test_load_board(board_data: dict[str, Any]) -> None:
    """Test loading a board export ignores extra fields."""
    board = load_board(json.dumps(board_data))

    assert board.lists[0] == TrelloList(id='1', name='Set List')
    assert board.cards[1] == Card(id_list='2', name='Idea X', closed=False)
    assert len(board.cards) == 4


def test_load_board_is_immutable(board_data: dict[str, Any]) -> None:
    """Test the loaded board cannot be modified."""
    board = load_board(json.dumps(board_data))

    with pytest.raises(AttributeError):
        board.cards[0].name = 'Other'  # type: ignore[misc]
    assert isinstance(board.cards, tuple)


def test_load_board_invalid_json() -> None:
    """Test invalid JSON raises ParseError."""
    with pytest.raises(ParseError, match="Invalid JSON"):
        load_board('{"cards": [')


def test_load_board_not_an_object() -> None:
    """Test a JSON array is rejected."""
    with pytest.raises(ParseError, match="must be an object"):
        load_board('[]')


def test_load_board_missing_sections() -> None:
    """Test missing lists and cards are both reported."""
    with pytest.raises(ParseError) as exc_info:
        load_board('{}')

    assert exc_info.value.errors == [
        "Board missing required field 'lists'",
        "Board missing required field 'cards'",
    ]


def test_board_from_dict_collects_all_errors() -> None:
    """Test every schema violation is listed in one error."""
    data = {
        'lists': [{'id': 1, 'name': 'Set List'}, 'oops'],
        'cards': [
            {'idList': '1', 'name': 'Song A'},
            {'idList': '1', 'name': 'Song B', 'closed': 'no'},
        ],
    }

    with pytest.raises(ParseError) as exc_info:
        board_from_dict(data)

    errors = exc_info.value.errors
    assert "List 0 'id' must be a str" in errors
    assert "List 1 must be an object" in errors
    assert "Card 0 missing required field 'closed'" in errors
    assert "Card 1 'closed' must be a bool" in errors
    assert len(errors) == 4
    assert "Invalid board JSON" in str(exc_info.value)


def test_board_from_dict_sections_must_be_arrays() -> None:
    """Test non-array lists and cards are rejected."""
    with pytest.raises(ParseError) as exc_info:
        board_from_dict({'lists': {}, 'cards': 'none'})

    assert exc_info.value.errors == [
        "Board 'lists' must be an array",
        "Board 'cards' must be an array",
    ]


def test_get_list_id(board_data: dict[str, Any]) -> None:
    """Test list resolution by exact name."""
    board = board_from_dict(board_data)

    assert get_list_id(board, 'Set List') == '1'
    assert get_list_id(board, 'Ideas') == '2'


def test_get_list_id_first_match_wins() -> None:
    """Test duplicate list names resolve to the first list."""
    board = Board(
        lists=(TrelloList(id='a', name='Set List'), TrelloList(id='b', name='Set List')),
        cards=(),
    )

    assert get_list_id(board, 'Set List') == 'a'


def test_get_list_id_not_found(board_data: dict[str, Any]) -> None:
    """Test matching is exact and case-sensitive."""
    board = board_from_dict(board_data)

    with pytest.raises(ListNotFoundError, match="Couldn't find list named 'set list'"):
        get_list_id(board, 'set list')
    with pytest.raises(ListNotFoundError):
        get_list_id(board, 'Set')


def test_get_card_names_on_list(board_data: dict[str, Any]) -> None:
    """Test only open cards on the list are returned, in board order."""
    board = board_from_dict(board_data)

    assert get_card_names_on_list(board, '1') == ['Song A', 'Song B - Capo 2']
    assert get_card_names_on_list(board, '2') == ['Idea X']


def test_get_card_names_on_list_empty() -> None:
    """Test a list without open cards yields an empty set list."""
    board = Board(
        lists=(TrelloList(id='1', name='Set List'),),
        cards=(Card(id_list='1', name='Old Song', closed=True),),
    )

    assert get_card_names_on_list(board, '1') == []
    assert get_set_list(board, 'Set List') == []


def test_get_set_list(board_data: dict[str, Any]) -> None:
    """Test set list extraction keeps card order across interleaved lists."""
    board_data['cards'].append({'idList': '1', 'name': 'Song D', 'closed': False})
    board = board_from_dict(board_data)

    assert get_set_list(board, 'Set List') == ['Song A', 'Song B - Capo 2', 'Song D']


def test_count_open_cards(board_data: dict[str, Any]) -> None:
    """Test open card counts per list."""
    board_data['lists'].append({'id': '3', 'name': 'Empty'})
    board = board_from_dict(board_data)

    assert count_open_cards(board) == {'1': 2, '2': 1, '3': 0}
