"""
Rexster Data Models

Vertices and edges are property bags keyed by string, holding arbitrary
JSON values. Reserved keys:

    _id      identity
    _type    "vertex" or "edge"
    _outV    edge tail vertex id
    _inV     edge head vertex id
    _label   edge label

Responses wrap a ``results`` payload whose shape depends on the request;
it is classified once when the envelope is decoded.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

JSONValue = Union[str, int, float, bool, None, dict[str, "JSONValue"], list["JSONValue"]]
Properties = dict[str, JSONValue]


class KeyIndexType(str, Enum):
    """Element kinds a key index can cover."""
    VERTEX = "vertex"
    EDGE = "edge"


class TxActionType(str, Enum):
    """Batch transaction actions."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def format_id(value: Any) -> str:
    """Render an ``_id`` value as text, independent of locale."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


# ==================== ENTITIES ====================

class _Element:
    """Common behaviour of vertices and edges."""

    TYPE = ""

    def __init__(self, properties: Properties | None = None):
        self.properties: Properties = copy.deepcopy(properties) if properties else {}

    @property
    def id(self) -> str:
        return format_id(self.properties.get("_id"))

    @property
    def type(self) -> str:
        return self.TYPE

    def get(self, key: str) -> str:
        """
        Get a string property.

        Returns an empty string when the key is missing or holds a
        non-string value; read ``properties`` directly for other types.
        """
        value = self.properties.get(key)
        if isinstance(value, str):
            return value
        return ""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.properties == other.properties

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.properties!r})"


class Vertex(_Element):
    """A graph vertex."""

    TYPE = "vertex"


class Edge(_Element):
    """A directed, labeled edge between two vertices."""

    TYPE = "edge"

    @property
    def out_v(self) -> str:
        return format_id(self.properties.get("_outV"))

    @property
    def in_v(self) -> str:
        return format_id(self.properties.get("_inV"))

    @property
    def label(self) -> str:
        return self.get("_label")


def new_vertex(vertex_id: str, properties: Properties | None = None) -> Vertex:
    """Build a vertex from a copy of ``properties`` with the given id."""
    vertex = Vertex(properties)
    vertex.properties["_id"] = vertex_id
    return vertex


def new_edge(
    edge_id: str,
    out_v: str,
    in_v: str,
    label: str,
    properties: Properties | None = None,
) -> Edge:
    """Build an edge from a copy of ``properties`` with its id, endpoints and label."""
    edge = Edge(properties)
    edge.properties["_id"] = edge_id
    edge.properties["_outV"] = out_v
    edge.properties["_label"] = label
    edge.properties["_inV"] = in_v
    return edge


@dataclass
class TxAction:
    """One entry of a batch transaction."""
    item: Vertex | Edge
    action: TxActionType = TxActionType.CREATE


# ==================== RESPONSES ====================

class ResultKind(str, Enum):
    """Shape of a response's ``results`` payload."""
    EMPTY = "empty"
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


@dataclass(frozen=True)
class Results:
    kind: ResultKind
    value: Any = None

    @classmethod
    def from_json(cls, value: Any) -> "Results":
        if value is None:
            return cls(ResultKind.EMPTY)
        if isinstance(value, dict):
            return cls(ResultKind.OBJECT, value)
        if isinstance(value, list):
            return cls(ResultKind.ARRAY, value)
        return cls(ResultKind.SCALAR, value)


def _is_element(value: Any, type_name: str) -> bool:
    return isinstance(value, dict) and value.get("_type") == type_name


class Response(BaseModel):
    """
    A successful Rexster response envelope.

    Accessors return None when the payload does not have the requested
    shape; they never raise.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    results: Results = Results(ResultKind.EMPTY)
    success: bool = False
    version: str = ""
    query_time: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "Response":
        """
        Decode a response body.

        Missing or mistyped fields take their zero value.
        """
        if not isinstance(data, dict):
            data = {}

        success = data.get("success")
        version = data.get("version")
        query_time = data.get("queryTime")
        if isinstance(query_time, bool) or not isinstance(query_time, (int, float)):
            query_time = 0.0

        return cls(
            results=Results.from_json(data.get("results")),
            success=success if isinstance(success, bool) else False,
            version=version if isinstance(version, str) else "",
            query_time=float(query_time),
        )

    def vertex(self) -> Vertex | None:
        """Get the single vertex in the response, if that is what it holds."""
        if self.results.kind == ResultKind.OBJECT and _is_element(self.results.value, Vertex.TYPE):
            return Vertex(self.results.value)
        return None

    def vertices(self) -> list[Vertex] | None:
        """Get the array of vertices in the response; None if any element is not a vertex."""
        if self.results.kind != ResultKind.ARRAY:
            return None
        if not all(_is_element(item, Vertex.TYPE) for item in self.results.value):
            return None
        return [Vertex(item) for item in self.results.value]

    def edge(self) -> Edge | None:
        """Get the single edge in the response, if that is what it holds."""
        if self.results.kind == ResultKind.OBJECT and _is_element(self.results.value, Edge.TYPE):
            return Edge(self.results.value)
        return None

    def edges(self) -> list[Edge] | None:
        """Get the array of edges in the response; None if any element is not an edge."""
        if self.results.kind != ResultKind.ARRAY:
            return None
        if not all(_is_element(item, Edge.TYPE) for item in self.results.value):
            return None
        return [Edge(item) for item in self.results.value]


class ErrorEnvelope(BaseModel):
    """Body of a non-200 Rexster response."""

    message: str = ""
    error: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorEnvelope":
        if not isinstance(data, dict):
            data = {}
        message = data.get("message")
        error = data.get("error")
        return cls(
            message=message if isinstance(message, str) else "",
            error=error if isinstance(error, str) else "",
        )
