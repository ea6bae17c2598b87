"""
Noteboard Canvas: API Client (Sync Layer transport)
===================================================

What:  Async HTTP client for the board and cards resources.
How:   Thin wrapper over httpx.AsyncClient. Every call checks the
       `success` envelope and raises SyncError on any failure.

    get_board(board_id)            GET  /board?id=
    save_board_view(board_id, …)   PUT  /board
    list_cards(board_id)           GET  /cards?board_id=
    create_card(payload)           POST /cards
    update_card(card_id, **fields) PUT  /cards

No retries and no request cancellation: a failed call raises once and the
caller decides whether to log it.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

import httpx

from noteboard.config import settings
from noteboard.exceptions import SyncError

logger = logging.getLogger(__name__)


class NoteboardClient:
    """
    Client for the Noteboard API.

    Args:
        base_url: API root, e.g. "http://localhost:8000/api"
        timeout: Per-request timeout in seconds
        http: Pre-built httpx.AsyncClient (tests pass one bound to the ASGI
              app or a MockTransport); the client is then not closed here
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.api_timeout,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "NoteboardClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Board ─────────────────────────────────────────────────────────────

    async def get_board(self, board_id: int) -> Dict[str, Any]:
        data = await self._request("GET", "/board", params={"id": board_id})
        board = data.get("board")
        if not isinstance(board, dict):
            raise SyncError("Board response carried no board", context={"board_id": board_id})
        return board

    async def save_board_view(
        self, board_id: int, view_x: int, view_y: int, zoom: float
    ) -> None:
        await self._request(
            "PUT",
            "/board",
            json={"id": board_id, "view_x": view_x, "view_y": view_y, "zoom": zoom},
        )

    # ── Cards ─────────────────────────────────────────────────────────────

    async def list_cards(self, board_id: int) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/cards", params={"board_id": board_id})
        return list(data.get("cards") or [])

    async def create_card(self, payload: Dict[str, Any]) -> int:
        data = await self._request("POST", "/cards", json=payload)
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError):
            raise SyncError("Create response carried no card id")

    async def update_card(self, card_id: int, **fields: Any) -> None:
        await self._request("PUT", "/cards", json={"id": card_id, **fields})

    # ── Transport ─────────────────────────────────────────────────────────

    async def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        rid = uuid.uuid4().hex[:8]
        try:
            response = await self._http.request(
                method, path, headers={"X-Request-ID": rid}, **kwargs
            )
        except httpx.HTTPError as e:
            raise SyncError(
                f"{method} {path} failed: {e}",
                context={"request_id": rid, "error_type": type(e).__name__},
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_error or data.get("success") is not True:
            message = data.get("error") or f"{method} {path} returned {response.status_code}"
            raise SyncError(
                message,
                status_code=response.status_code,
                context={"request_id": rid, "method": method, "path": path},
            )

        logger.debug("%s %s ok [%s]", method, path, rid)
        return data
