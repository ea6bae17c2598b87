"""
Noteboard Canvas: API Client Tests
==================================

What we test:
    ✅ Requests hit the right method, path and payload
    ✅ Error envelopes, HTTP errors and transport failures raise SyncError
    ✅ The client talks to the real app over ASGI
"""

import httpx
import pytest

from noteboard.canvas.api import NoteboardClient
from noteboard.exceptions import SyncError


def client_for(handler):
    return NoteboardClient(
        http=httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://fake/api")
    )


class TestRequests:

    @pytest.mark.asyncio
    async def test_update_card_merges_id_and_fields(self, fake_api):
        await fake_api.client.update_card(5, title="x", pos_x=3)

        assert fake_api.calls == [("PUT", "/cards", {"id": 5, "title": "x", "pos_x": 3})]

    @pytest.mark.asyncio
    async def test_list_cards_sends_board_id(self, fake_api):
        await fake_api.client.list_cards(1)

        assert fake_api.calls == [("GET", "/cards", {"board_id": "1"})]

    @pytest.mark.asyncio
    async def test_create_returns_id(self, fake_api):
        assert await fake_api.client.create_card({"title": "t"}) == 101

    @pytest.mark.asyncio
    async def test_request_id_header_sent(self):
        seen = []

        def handler(request):
            seen.append(request.headers.get("X-Request-ID"))
            return httpx.Response(200, json={"success": True})

        client = client_for(handler)
        await client.update_card(1, title="x")

        assert len(seen[0]) == 8


class TestFailures:

    @pytest.mark.asyncio
    async def test_error_envelope_raises(self):
        client = client_for(
            lambda request: httpx.Response(400, json={"success": False, "error": "No fields to update"})
        )

        with pytest.raises(SyncError) as exc_info:
            await client.update_card(1)
        assert exc_info.value.message == "No fields to update"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_success_false_with_200_raises(self):
        client = client_for(lambda request: httpx.Response(200, json={"success": False}))

        with pytest.raises(SyncError):
            await client.get_board(1)

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        client = client_for(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(SyncError) as exc_info:
            await client.list_cards(1)
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SyncError):
            await client_for(handler).save_board_view(1, 0, 0, 1.0)

    @pytest.mark.asyncio
    async def test_create_without_id_raises(self):
        client = client_for(lambda request: httpx.Response(201, json={"success": True}))

        with pytest.raises(SyncError):
            await client.create_card({})


class TestAgainstApp:

    @pytest.mark.asyncio
    async def test_board_round_trip(self, board_api):
        await board_api.save_board_view(1, -40, 25, 0.75)

        board = await board_api.get_board(1)
        assert (board["view_x"], board["view_y"], board["zoom"]) == (-40, 25, 0.75)

    @pytest.mark.asyncio
    async def test_unknown_card_is_sync_error(self, board_api):
        with pytest.raises(SyncError) as exc_info:
            await board_api.update_card(12345, title="x")
        assert exc_info.value.status_code == 404
