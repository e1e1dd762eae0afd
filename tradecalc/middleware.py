"""ASGI middleware guarding request body size."""

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from structlog import get_logger

from .dispatch import error_body
from .exceptions import PayloadTooLargeError

logger = get_logger()


def _declared_length(scope: Scope) -> int | None:
    """Return the Content-Length header as an int, or None when absent.

    An unparsable header is reported as -1 so callers can reject it.
    """
    for header, value in scope.get("headers", []):
        if header == b"content-length":
            try:
                return int(value)
            except ValueError:
                return -1
    return None


class MaxBodySizeMiddleware:
    """Answer 413 PAYLOAD_TOO_LARGE for bodies over ``max_body_size`` bytes.

    The declared Content-Length is checked up front; chunked bodies are
    counted as they stream in.
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = _declared_length(scope)
        if declared is not None and not 0 <= declared <= self.max_body_size:
            await self._reject(scope, receive, send, declared)
            return

        received = 0

        async def counting_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    raise PayloadTooLargeError(self.max_body_size)
            return message

        try:
            await self.app(scope, counting_receive, send)
        except PayloadTooLargeError:
            await self._reject(scope, receive, send, received)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        error = PayloadTooLargeError(self.max_body_size)
        logger.info("request_body_rejected", path=scope.get("path"), size=size, limit=self.max_body_size)
        response = JSONResponse(status_code=error.status, content=error_body(error))
        await response(scope, receive, send)
