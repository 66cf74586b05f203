"""
Rexster Client

Client for the Rexster graph server REST API: vertex and edge CRUD, key
index queries, Gremlin script evaluation and batch transactions.
"""

from rexster_client.config import RexsterSettings, get_settings
from rexster_client.connection import RexsterServer
from rexster_client.errors import (
    BatchValueError,
    RexsterError,
    RexsterServerError,
    UnsupportedActionError,
)
from rexster_client.graph import Graph
from rexster_client.logging import (
    EventLogger,
    NullEventLogger,
    StructlogEventLogger,
    configure_logging,
)
from rexster_client.models import (
    Edge,
    KeyIndexType,
    Response,
    ResultKind,
    Results,
    TxAction,
    TxActionType,
    Vertex,
    new_edge,
    new_vertex,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "RexsterServer",
    "RexsterSettings",
    "get_settings",
    "Response",
    "Results",
    "ResultKind",
    "Vertex",
    "Edge",
    "new_vertex",
    "new_edge",
    "TxAction",
    "TxActionType",
    "KeyIndexType",
    "RexsterError",
    "RexsterServerError",
    "UnsupportedActionError",
    "BatchValueError",
    "EventLogger",
    "NullEventLogger",
    "StructlogEventLogger",
    "configure_logging",
]
