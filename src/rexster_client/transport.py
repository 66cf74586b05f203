"""
Rexster HTTP Transport

Executes one HTTP request per call and resolves it to either a decoded
``Response`` or a ``RexsterServerError``. No retries are attempted.
"""

from typing import Any

import httpx

from rexster_client.connection import RexsterServer
from rexster_client.errors import RexsterServerError
from rexster_client.logging import EventLogger, NullEventLogger
from rexster_client.models import ErrorEnvelope, Response


class RexsterTransport:
    """
    Sends requests to a Rexster server.

    A fresh ``httpx.Client`` is opened for every call. ``http_transport`` is
    handed to that client unchanged, which lets callers mount a custom
    transport (for example ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        server: RexsterServer,
        event_logger: EventLogger | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ):
        self.server = server
        self.event_logger = event_logger or NullEventLogger()
        self.http_transport = http_transport

    def get(self, url: str) -> Response:
        return self.send("GET", url)

    def send(self, method: str, url: str, data: dict[str, Any] | None = None) -> Response:
        """
        Issue a request and decode the reply.

        Args:
            method: HTTP method ("GET" or "POST")
            url: Fully built request URL
            data: Optional JSON object body

        Returns:
            The decoded response envelope

        Raises:
            RexsterServerError: On any non-200 status
            httpx.TransportError: On connection level failures
        """
        self.event_logger.log_event("http_request", method=method, url=url)

        client_kwargs: dict[str, Any] = {"transport": self.http_transport}
        if self.server.timeout is not None:
            client_kwargs["timeout"] = self.server.timeout

        try:
            with httpx.Client(**client_kwargs) as client:
                if data is not None:
                    http_response = client.request(method, url, json=data)
                else:
                    http_response = client.request(method, url)
        except httpx.TransportError as e:
            self.event_logger.log_event("http_failed", method=method, url=url, error=str(e))
            raise

        body = _decode_body(http_response)

        if http_response.status_code == 200:
            return Response.from_dict(body)

        envelope = ErrorEnvelope.from_dict(body)
        error = RexsterServerError(
            envelope.message,
            envelope.error,
            status_code=http_response.status_code,
        )
        self.event_logger.log_event(
            "http_failed",
            method=method,
            url=url,
            status_code=http_response.status_code,
            error=str(error),
        )
        raise error


def _decode_body(http_response: httpx.Response) -> Any:
    # Undecodable bodies are treated like empty ones
    try:
        return http_response.json()
    except ValueError:
        return None
