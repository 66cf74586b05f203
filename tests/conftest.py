"""
Shared fixtures: an in-memory Rexster server mounted through httpx.MockTransport.

The fake serves the sample "tinkergraph" shipped with Rexster and speaks
enough of the REST dialect for the client's operations.
"""

import copy
import json
from urllib.parse import unquote

import httpx
import pytest

from rexster_client import Graph, RexsterServer


TINKERGRAPH_VERTICES = {
    "1": {"name": "marko", "age": 29},
    "2": {"name": "vadas", "age": 27},
    "3": {"name": "lop", "lang": "java"},
    "4": {"name": "josh", "age": 32},
    "5": {"name": "ripple", "lang": "java"},
    "6": {"name": "peter", "age": 35},
}

TINKERGRAPH_EDGES = {
    "7": ("1", "knows", "2", {"weight": 0.5}),
    "8": ("1", "knows", "4", {"weight": 1.0}),
    "9": ("1", "created", "3", {"weight": 0.4}),
    "10": ("4", "created", "5", {"weight": 1.0}),
    "11": ("4", "created", "3", {"weight": 0.4}),
    "12": ("6", "created", "3", {"weight": 0.2}),
}


class FakeRexster:
    """A tiny Rexster REST server holding one graph in memory."""

    def __init__(self, graph_name: str = "tinkergraph"):
        self.graph_name = graph_name
        self.vertices: dict[str, dict] = {}
        self.edges: dict[str, dict] = {}
        self.key_indices: dict[str, set] = {"vertex": set(), "edge": set()}
        self.requests: list[httpx.Request] = []

        for vid, props in TINKERGRAPH_VERTICES.items():
            self.vertices[vid] = {"_id": vid, "_type": "vertex", **props}
        for eid, (out_v, label, in_v, props) in TINKERGRAPH_EDGES.items():
            self.edges[eid] = {
                "_id": eid,
                "_type": "edge",
                "_outV": out_v,
                "_label": label,
                "_inV": in_v,
                **props,
            }

    # ==================== HELPERS ====================

    @staticmethod
    def ok(results, **extra) -> httpx.Response:
        body = {"version": "2.4.0", "queryTime": 1.25, "success": True, "results": results}
        body.update(extra)
        return httpx.Response(200, json=body)

    @staticmethod
    def fail(status: int, message: str, error: str = "") -> httpx.Response:
        body = {"message": message}
        if error:
            body["error"] = error
        return httpx.Response(status, json=body)

    def _matches(self, element: dict, key: str, value: str) -> bool:
        return key in element and str(element[key]) == value

    def _upsert(self, store: dict, element_id: str, element_type: str, props: dict) -> dict:
        element = store.setdefault(element_id, {"_id": element_id, "_type": element_type})
        for key, value in props.items():
            if key not in ("_id", "_type", "_action"):
                element[key] = value
        return element

    # ==================== DISPATCH ====================

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        segments = [unquote(s) for s in raw_path.strip("/").split("/")]

        if len(segments) < 2 or segments[0] != "graphs":
            return self.fail(404, "Not found")
        if segments[1] != self.graph_name:
            return self.fail(404, f"Graph [{segments[1]}] could not be found")

        rest = segments[2:]
        params = request.url.params
        body = json.loads(request.content) if request.content else None

        if rest == ["vertices"]:
            found = [v for v in self.vertices.values() if self._matches(v, params["key"], params["value"])]
            return self.ok(found, totalSize=len(found))

        if len(rest) >= 2 and rest[0] == "vertices":
            vid = rest[1]
            if request.method == "POST":
                return self.ok(self._upsert(self.vertices, vid, "vertex", body or {}))
            if vid not in self.vertices:
                return self.fail(404, f"Vertex with [{vid}] cannot be found.")
            if len(rest) == 2:
                return self.ok(self.vertices[vid])
            direction = rest[2]
            found = [
                e for e in self.edges.values()
                if (direction in ("inE", "bothE") and e["_inV"] == vid)
                or (direction in ("outE", "bothE") and e["_outV"] == vid)
            ]
            return self.ok(found, totalSize=len(found))

        if rest == ["edges"]:
            found = [e for e in self.edges.values() if self._matches(e, params["key"], params["value"])]
            return self.ok(found, totalSize=len(found))

        if len(rest) == 2 and rest[0] == "edges":
            eid = rest[1]
            if request.method == "POST":
                props = body or {}
                if eid not in self.edges and not all(k in props for k in ("_outV", "_inV", "_label")):
                    return self.fail(400, "an edge must have a valid _outV, _inV, and _label")
                return self.ok(self._upsert(self.edges, eid, "edge", props))
            if eid not in self.edges:
                return self.fail(404, f"Edge with id [{eid}] cannot be found.")
            return self.ok(self.edges[eid])

        if len(rest) == 3 and rest[0] == "keyindices" and request.method == "POST":
            self.key_indices[rest[1]].add(rest[2])
            return httpx.Response(200, json={"queryTime": 0.5})

        if rest == ["tp", "gremlin"]:
            return self._eval(params["script"])

        if rest == ["tp", "batch", "vertices"]:
            values = params["values"].strip("[]").split(",")
            found = [
                v for value in values
                for v in self.vertices.values()
                if self._matches(v, params["key"], value)
            ]
            return self.ok(found)

        if rest == ["tp", "batch", "tx"] and request.method == "POST":
            for item in body["tx"]:
                if item["_action"] == "delete":
                    return self.fail(500, "delete is not supported by this fake")
                store = self.vertices if item["_type"] == "vertex" else self.edges
                self._upsert(store, str(item.get("_id", f"tx{len(store)}")), item["_type"], item)
            return httpx.Response(200, json={"success": True, "txProcessed": len(body["tx"])})

        return self.fail(404, f"No route for {request.method} {raw_path}")

    def _eval(self, script: str) -> httpx.Response:
        if script.startswith("g.V[") and script.endswith("]"):
            vid = script[4:-1]
            return self.ok([copy.deepcopy(self.vertices[vid])] if vid in self.vertices else [])
        if script == "g.V.count()":
            return self.ok([len(self.vertices)])
        return self.fail(
            500,
            "",
            f"javax.script.ScriptException: groovy.lang.MissingPropertyException: "
            f"No such property: {script} for class: Script1",
        )


@pytest.fixture
def fake_rexster():
    """In-memory Rexster serving the sample tinkergraph."""
    return FakeRexster()


@pytest.fixture
def server():
    """Server description pointing at the fake host."""
    return RexsterServer(host="127.0.0.1", rest_port=8182)


@pytest.fixture
def graph(fake_rexster, server):
    """Graph handle wired to the fake server."""
    return Graph("tinkergraph", server, http_transport=httpx.MockTransport(fake_rexster.handle))


class RecordingLogger:
    """Event logger that keeps every event for inspection."""

    def __init__(self):
        self.events = []

    def log_event(self, event, **fields):
        self.events.append((event, fields))


@pytest.fixture
def recording_logger():
    """Event logger that records instead of emitting."""
    return RecordingLogger()
