"""Trello API client for downloading board exports."""

import json
from pathlib import Path
from typing import Any

import requests

from trello_setlist.services.exporter import write_file
from trello_setlist.utils.config import get_credentials

TRELLO_BASE_URL = 'https://api.trello.com/1'


class TrelloClient:
    """Read-only client for the Trello REST API."""

    def __init__(self) -> None:
        """Initialize TrelloClient with credentials and session."""
        self.api_key, self.token = get_credentials()
        self.base_url = TRELLO_BASE_URL
        self.session = requests.Session()

    def _request(self, method: str, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make API request to Trello.

        Args:
            method: HTTP method (GET, POST, etc.).
            endpoint: API endpoint path.
            params: Optional query parameters.

        Returns:
            JSON response from the API.

        Raises:
            requests.HTTPError: If the request fails.
        """
        url = f"{self.base_url}/{endpoint}"
        auth_params: dict[str, Any] = {
            'key': self.api_key,
            'token': self.token
        }
        if params:
            auth_params.update(params)

        response = self.session.request(method, url, params=auth_params)
        response.raise_for_status()
        return response.json()

    def get_boards(self) -> list[dict[str, Any]]:
        """Get all boards accessible to the authenticated user."""
        return self._request('GET', 'members/me/boards', {'filter': 'open', 'fields': 'name'})

    def get_board_export(self, board_id: str) -> dict[str, Any]:
        """Get a board with its lists and cards, archived cards included.

        Args:
            board_id: The ID of the board.

        Returns:
            Board dictionary shaped like Trello's JSON export.
        """
        params = {
            'fields': 'name,url',
            'lists': 'all',
            'list_fields': 'name,closed,pos',
            'cards': 'all',
            'card_fields': 'name,idList,closed,pos',
        }
        return self._request('GET', f'boards/{board_id}', params)


def save_board_export(board_data: dict[str, Any], output: str | Path) -> Path:
    """Write board data as pretty-printed JSON.

    Raises:
        ExportError: If the file cannot be written.
    """
    output_path = Path(output)
    write_file(output_path, json.dumps(board_data, indent=2, ensure_ascii=False) + '\n')
    return output_path
