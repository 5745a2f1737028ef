"""Shared fixtures for set list tests."""

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def board_data() -> dict[str, Any]:
    """Board export with one set list, an archived card and an unrelated list."""
    return {
        'id': 'board123',
        'name': 'Bookends',
        'lists': [
            {'id': '1', 'name': 'Set List', 'closed': False},
            {'id': '2', 'name': 'Ideas', 'closed': False},
        ],
        'cards': [
            {'id': 'c1', 'idList': '1', 'name': 'Song A', 'closed': False},
            {'id': 'c2', 'idList': '2', 'name': 'Idea X', 'closed': False},
            {'id': 'c3', 'idList': '1', 'name': 'Song B - Capo 2', 'closed': False},
            {'id': 'c4', 'idList': '1', 'name': 'Song C', 'closed': True},
        ],
    }


@pytest.fixture
def board_file(tmp_path: Path, board_data: dict[str, Any]) -> Path:
    """Board export written to disk."""
    path = tmp_path / 'exported.json'
    path.write_text(json.dumps(board_data), encoding='utf-8')
    return path
