"""Request body size limit middleware.

Rejects bodies above max_bytes with 413, whether the size is announced by
Content-Length or only discovered while reading a chunked body. Raw ASGI.
"""

import json

from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class PayloadTooLarge(HTTPException):
    """Raised from the wrapped receive when a chunked body crosses the limit.

    An HTTPException so body parsing inside the app re-raises it untouched
    and the exception handlers render it as 413.
    """

    def __init__(self, max_bytes: int) -> None:
        super().__init__(413, f"Request body must be at most {max_bytes} bytes")


class RequestSizeLimitMiddleware:
    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    async def _reject(self, send: Send, received: int | None = None) -> None:
        details: dict[str, int] = {"max_bytes": self.max_bytes}
        if received is not None:
            details["content_length"] = received
        body = json.dumps(
            {
                "error": "PAYLOAD_TOO_LARGE",
                "message": f"Request body must be at most {self.max_bytes} bytes",
                "details": details,
            }
        ).encode()
        await send(
            {
                "type": "http.response.start",
                "status": 413,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode()),
                ],
            }
        )
        await send({"type": "http.response.body", "body": body, "more_body": False})

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            try:
                length = int(declared)
            except ValueError:
                length = 0
            if length > self.max_bytes:
                await self._reject(send, length)
                return
            await self.app(scope, receive, send)
            return

        received = 0
        response_started = False

        async def counting_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    raise PayloadTooLarge(self.max_bytes)
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, counting_receive, tracking_send)
        except PayloadTooLarge:
            if response_started:
                raise
            await self._reject(send, received)
