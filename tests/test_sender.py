"""Tests for waypost.server.sender response emission rules."""

from waypost.http.response import Response
from waypost.server.sender import send_response


async def _send(response: Response, *, head: bool = False) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_200_preserves_body(self) -> None:
        messages = await _send(Response("ok"))

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert headers[b"content-length"] == b"2"
        assert messages[1] == {"type": "http.response.body", "body": b"ok"}

    async def test_binary_body_untouched(self) -> None:
        payload = bytes(range(256))
        messages = await _send(Response(payload, content_type="image/png"))
        assert messages[1]["body"] == payload
        assert dict(messages[0]["headers"])[b"content-length"] == b"256"

    async def test_utf8_length_counts_bytes(self) -> None:
        messages = await _send(Response("héllo"))
        assert dict(messages[0]["headers"])[b"content-length"] == b"6"

    async def test_extra_headers_lowercased(self) -> None:
        messages = await _send(Response("x").with_header("X-Site", "waypost"))
        assert (b"x-site", b"waypost") in messages[0]["headers"]

    async def test_single_content_length(self) -> None:
        response = Response("abc").with_header("Content-Length", "999")
        messages = await _send(response)
        lengths = [v for k, v in messages[0]["headers"] if k == b"content-length"]
        assert lengths == [b"3"]

    async def test_204_drops_body(self) -> None:
        messages = await _send(Response("unexpected-body").with_status(204))
        assert dict(messages[0]["headers"])[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    async def test_head_keeps_length_drops_body(self) -> None:
        messages = await _send(Response("hello"), head=True)
        assert dict(messages[0]["headers"])[b"content-length"] == b"5"
        assert messages[1]["body"] == b""
