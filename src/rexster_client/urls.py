"""
Rexster REST URLs

Builds resource URLs for a graph served by Rexster. See
https://github.com/tinkerpop/rexster/wiki/Basic-REST-API for the layout.
"""

from typing import TYPE_CHECKING, Iterable
from urllib.parse import quote, urlencode

from rexster_client.errors import BatchValueError
from rexster_client.models import KeyIndexType

if TYPE_CHECKING:
    from rexster_client.graph import Graph


VERTEX_SUBRESOURCES = ("bothE", "inE", "outE")


def escape_path_segment(segment: str) -> str:
    """
    Percent-encode an identifier for use as a single path segment.

    Every ``/`` becomes ``%2F``. Existing ``%`` escapes are left alone, so
    escaping an already escaped segment returns it unchanged.

    An identifier that itself contains a ``%XX`` sequence is taken to be
    escaped already: ``"a%41"`` reaches the server as ``aA``. A ``%`` not
    followed by two hex digits is escaped by httpx when the request is sent.
    """
    return quote(segment, safe="%")


def graph_url(graph: "Graph") -> str:
    return f"{graph.server.base_url}/graphs/{escape_path_segment(graph.name)}"


def vertex_url(graph: "Graph", vertex_id: str) -> str:
    return f"{graph_url(graph)}/vertices/{escape_path_segment(vertex_id)}"


def vertex_sub_url(graph: "Graph", vertex_id: str, subresource: str) -> str:
    """URL of a vertex's incident edges (``bothE``, ``inE`` or ``outE``)."""
    if subresource not in VERTEX_SUBRESOURCES:
        raise ValueError(
            f"Unsupported vertex subresource: {subresource}. "
            f"Supported: {list(VERTEX_SUBRESOURCES)}"
        )
    return f"{vertex_url(graph, vertex_id)}/{subresource}"


def edge_url(graph: "Graph", edge_id: str) -> str:
    return f"{graph_url(graph)}/edges/{escape_path_segment(edge_id)}"


def query_vertices_url(graph: "Graph", key: str, value: str) -> str:
    query = urlencode([("key", key), ("value", value)])
    return f"{graph_url(graph)}/vertices?{query}"


def query_edges_url(graph: "Graph", key: str, value: str) -> str:
    query = urlencode([("key", key), ("value", value)])
    return f"{graph_url(graph)}/edges?{query}"


def query_vertices_batch_url(graph: "Graph", key: str, values: Iterable[str]) -> str:
    """
    URL of a batch key index lookup. Requires the batch kibble.

    The server splits the bracketed list on commas, so a value containing a
    comma cannot be expressed and is rejected.

    Raises:
        BatchValueError: If any value contains a comma
    """
    values = list(values)
    for value in values:
        if "," in value:
            raise BatchValueError(f"Batch lookup value contains a comma: {value!r}")

    values_array = "[" + ",".join(values) + "]"
    query = urlencode([("type", "keyindex"), ("key", key), ("values", values_array)])
    return f"{graph_url(graph)}/tp/batch/vertices?{query}"


def eval_url(graph: "Graph", script: str) -> str:
    query = urlencode([("script", script)])
    return f"{graph_url(graph)}/tp/gremlin?{query}"


def batch_tx_url(graph: "Graph") -> str:
    return f"{graph_url(graph)}/tp/batch/tx"


def key_index_url(graph: "Graph", index_type: KeyIndexType | str, key: str) -> str:
    index_type = KeyIndexType(index_type)
    return f"{graph_url(graph)}/keyindices/{index_type.value}/{escape_path_segment(key)}"
