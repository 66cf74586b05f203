"""
Rexster Graph

Operation surface for one named graph served by Rexster. Implements a
subset of the Basic REST API:
https://github.com/tinkerpop/rexster/wiki/Basic-REST-API

The *_batch operations and ``batch()`` need the batch kibble installed on
the server:
https://github.com/tinkerpop/rexster/tree/master/rexster-kibbles/batch-kibble
"""

from typing import Any, Iterable

import httpx

from rexster_client import urls
from rexster_client.config import RexsterSettings
from rexster_client.connection import RexsterServer
from rexster_client.errors import UnsupportedActionError
from rexster_client.logging import EventLogger, NullEventLogger, StructlogEventLogger
from rexster_client.models import (
    Edge,
    KeyIndexType,
    Response,
    TxAction,
    TxActionType,
    Vertex,
)
from rexster_client.transport import RexsterTransport


class Graph:
    """
    A graph served by a Rexster server.

    Every operation performs exactly one HTTP request and returns the decoded
    ``Response``. Non-200 replies raise ``RexsterServerError``; network
    failures raise the underlying ``httpx.TransportError``.

    Usage:
        graph = Graph("tinkergraph", RexsterServer(host="127.0.0.1"))
        vertex = graph.get_vertex("1").vertex()
    """

    def __init__(
        self,
        name: str,
        server: RexsterServer,
        event_logger: EventLogger | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ):
        self.name = name
        self.server = server

        if event_logger is None:
            if server.debug:
                event_logger = StructlogEventLogger(__name__, graph=name)
            else:
                event_logger = NullEventLogger()
        self.event_logger = event_logger

        self._transport = RexsterTransport(server, event_logger, http_transport)

    @classmethod
    def from_settings(cls, settings: RexsterSettings, **kwargs: Any) -> "Graph":
        """Create a graph handle from application settings."""
        return cls(settings.graph, RexsterServer.from_settings(settings), **kwargs)

    def __repr__(self) -> str:
        return f"Graph(name={self.name!r}, server={self.server.base_url!r})"

    def _log(self, operation: str, **fields: Any) -> None:
        self.event_logger.log_event("graph_operation", graph=self.name, operation=operation, **fields)

    # ==================== VERTEX OPERATIONS ====================

    def get_vertex(self, vertex_id: str) -> Response:
        """Get a vertex by ID."""
        self._log("get_vertex", id=vertex_id)
        return self._transport.get(urls.vertex_url(self, vertex_id))

    def query_vertices(self, key: str, value: str) -> Response:
        """Get all vertices whose property ``key`` equals ``value``."""
        self._log("query_vertices", key=key, value=value)
        return self._transport.get(urls.query_vertices_url(self, key, value))

    def query_vertices_batch(self, key: str, values: Iterable[str]) -> Response:
        """
        Get all vertices in a key index with any of the given values.

        Requires the batch kibble.

        Raises:
            BatchValueError: If a value contains a comma
        """
        values = list(values)
        self._log("query_vertices_batch", key=key, count=len(values))
        return self._transport.get(urls.query_vertices_batch_url(self, key, values))

    def get_vertex_both_e(self, vertex_id: str) -> Response:
        """Get all edges incident to a vertex."""
        self._log("get_vertex_both_e", id=vertex_id)
        return self._transport.get(urls.vertex_sub_url(self, vertex_id, "bothE"))

    def get_vertex_in_e(self, vertex_id: str) -> Response:
        """Get the edges pointing into a vertex."""
        self._log("get_vertex_in_e", id=vertex_id)
        return self._transport.get(urls.vertex_sub_url(self, vertex_id, "inE"))

    def get_vertex_out_e(self, vertex_id: str) -> Response:
        """Get the edges leaving a vertex."""
        self._log("get_vertex_out_e", id=vertex_id)
        return self._transport.get(urls.vertex_sub_url(self, vertex_id, "outE"))

    def create_or_update_vertex(self, vertex: Vertex) -> Response:
        """POST the vertex's properties to its own URL; Rexster creates or updates it."""
        self._log("create_or_update_vertex", id=vertex.id)
        return self._transport.send("POST", urls.vertex_url(self, vertex.id), vertex.properties)

    # ==================== EDGE OPERATIONS ====================

    def get_edge(self, edge_id: str) -> Response:
        """Get an edge by ID."""
        self._log("get_edge", id=edge_id)
        return self._transport.get(urls.edge_url(self, edge_id))

    def query_edges(self, key: str, value: str) -> Response:
        """Get all edges whose property ``key`` equals ``value``."""
        self._log("query_edges", key=key, value=value)
        return self._transport.get(urls.query_edges_url(self, key, value))

    def create_or_update_edge(self, edge: Edge) -> Response:
        """POST the edge's properties to its own URL; Rexster creates or updates it."""
        self._log("create_or_update_edge", id=edge.id, out_v=edge.out_v, in_v=edge.in_v, label=edge.label)
        return self._transport.send("POST", urls.edge_url(self, edge.id), edge.properties)

    # ==================== SCRIPTS, INDICES, BATCH ====================

    def eval(self, script: str) -> Response:
        """
        Evaluate a Gremlin script on the server.

        The script is sent verbatim; no parameter binding is offered, so
        callers must not interpolate untrusted input into it.
        """
        # TODO: pass Gremlin params alongside the script once bindings are exposed
        self._log("eval", script=script)
        return self._transport.get(urls.eval_url(self, script))

    def create_key_index(self, index_type: KeyIndexType | str, key: str) -> Response:
        """Create a key index over ``key`` for vertices or edges."""
        index_type = KeyIndexType(index_type)
        self._log("create_key_index", index_type=index_type.value, key=key)
        return self._transport.send("POST", urls.key_index_url(self, index_type, key))

    def batch(self, actions: Iterable[TxAction]) -> Response:
        """
        Submit a batch transaction. Requires the batch kibble.

        Create and update actions are supported. Atomicity is up to the
        server.

        Raises:
            UnsupportedActionError: If any action is a delete; nothing is sent
        """
        actions = list(actions)
        self._log("batch", count=len(actions))

        tx = []
        for action in actions:
            action_type = TxActionType(action.action)
            if action_type == TxActionType.DELETE:
                raise UnsupportedActionError(
                    f"Batch delete is not supported (item {action.item.id!r})"
                )

            item = dict(action.item.properties)
            if action.item.id:
                item["_id"] = action.item.id
            item["_type"] = action.item.type
            item["_action"] = action_type.value
            tx.append(item)

        return self._transport.send("POST", urls.batch_tx_url(self), {"tx": tx})
