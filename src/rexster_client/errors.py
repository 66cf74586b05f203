"""
Rexster Client Errors

Transport failures (connection refused, timeouts, DNS) are not wrapped:
the underlying ``httpx.TransportError`` reaches the caller unchanged.
"""


class RexsterError(Exception):
    """Base class for errors raised by the client."""
    pass


class RexsterServerError(RexsterError):
    """
    The server answered with a non-200 status.

    The text of the error joins the ``message`` and ``error`` fields of the
    server's error envelope.
    """

    def __init__(self, message: str = "", error: str = "", status_code: int | None = None):
        self.message = message
        self.error = error
        self.status_code = status_code
        super().__init__(" ".join([message, error]).strip())


class UnsupportedActionError(RexsterError, ValueError):
    """Batch action type the client cannot submit."""
    pass


class BatchValueError(RexsterError, ValueError):
    """Value that cannot be carried in a batch key index lookup."""
    pass
