"""
Rexster Server Connection

Identifies one Rexster REST endpoint. Immutable; no sockets are held
between calls.
"""

from pydantic import BaseModel, ConfigDict

from rexster_client.config import RexsterSettings


class RexsterServer(BaseModel):
    """
    A Rexster server's REST endpoint.

    Usage:
        server = RexsterServer(host="127.0.0.1", rest_port=8182, debug=True)
    """

    model_config = ConfigDict(frozen=True)

    host: str
    rest_port: int = 8182
    debug: bool = False
    timeout: float | None = None

    @property
    def base_url(self) -> str:
        """Get the server's HTTP base URL."""
        return f"http://{self.host}:{self.rest_port}"

    @classmethod
    def from_settings(cls, settings: RexsterSettings) -> "RexsterServer":
        """Create a server description from application settings."""
        return cls(
            host=settings.host,
            rest_port=settings.rest_port,
            debug=settings.debug,
            timeout=settings.timeout,
        )
