"""
JSON input/output for the MST comparison tool
Reads graph definitions and writes per-graph results as JSON and CSV
"""

import csv
import json
import os
from dataclasses import dataclass

from mst_algorithms import AlgorithmResult
from mst_graph import Graph


CSV_HEADER = [
    "Graph ID",
    "Vertices",
    "Edges",
    "Prim Cost",
    "Prim Time (ms)",
    "Prim Operations",
    "Kruskal Cost",
    "Kruskal Time (ms)",
    "Kruskal Operations",
]


class GraphFormatError(ValueError):
    """Raised when an input document does not have the expected layout"""


def _require(obj, key, where):
    if not isinstance(obj, dict) or key not in obj:
        raise GraphFormatError(f"{where}: missing '{key}'")
    return obj[key]


def parse_graph(graph_obj):
    """Build a Graph from one entry of the 'graphs' array"""
    graph_id = _require(graph_obj, "id", "graph")
    if isinstance(graph_id, bool) or not isinstance(graph_id, int):
        raise GraphFormatError(f"graph: 'id' must be an integer, got {graph_id!r}")
    where = f"graph {graph_id}"

    nodes = _require(graph_obj, "nodes", where)
    if not isinstance(nodes, list):
        raise GraphFormatError(f"{where}: 'nodes' must be a list")

    edge_objs = _require(graph_obj, "edges", where)
    if not isinstance(edge_objs, list):
        raise GraphFormatError(f"{where}: 'edges' must be a list")

    edges = []
    for i, edge_obj in enumerate(edge_objs):
        edge_where = f"{where} edge {i}"
        edges.append(
            (
                _require(edge_obj, "from", edge_where),
                _require(edge_obj, "to", edge_where),
                _require(edge_obj, "weight", edge_where),
            )
        )

    return Graph(graph_id, nodes, edges)


def read_graphs(filename):
    """Read every graph from a {"graphs": [...]} JSON file"""
    if not os.path.exists(filename):
        raise FileNotFoundError(f"File not found: {filename}")

    with open(filename, "r", encoding="utf-8") as f:
        try:
            root = json.load(f)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"Invalid JSON in {filename}: {e}") from e
        except UnicodeDecodeError as e:
            raise GraphFormatError(f"{filename} is not valid UTF-8: {e}") from e

    graphs = _require(root, "graphs", filename)
    if not isinstance(graphs, list):
        raise GraphFormatError(f"{filename}: 'graphs' must be a list")

    return [parse_graph(graph_obj) for graph_obj in graphs]


def read_single_graph(filename):
    """First graph in the file, or None when the file holds none"""
    graphs = read_graphs(filename)
    return graphs[0] if graphs else None


def graph_to_dict(graph):
    return {
        "id": graph.id,
        "nodes": list(graph.nodes),
        "edges": [edge.to_dict() for edge in graph.edges],
    }


def write_graphs(graphs, filename):
    """Write graphs in the same layout read_graphs accepts"""
    _create_parent_dir(filename)
    with open(filename, "w") as f:
        json.dump({"graphs": [graph_to_dict(g) for g in graphs]}, f, indent=2)


@dataclass(frozen=True)
class GraphResult:
    """Both algorithms' outcomes for one input graph"""

    graph: Graph
    prim: AlgorithmResult
    kruskal: AlgorithmResult

    @property
    def same_cost(self):
        return self.prim.total_cost == self.kruskal.total_cost

    def to_dict(self):
        return {
            "graph_id": self.graph.id,
            "input_stats": {
                "vertices": self.graph.node_count,
                "edges": self.graph.edge_count,
                "connected": self.graph.is_connected(),
                "density": round(self.graph.density(), 4),
                "total_weight": self.graph.total_weight(),
            },
            "prim": self.prim.to_dict(),
            "kruskal": self.kruskal.to_dict(),
        }

    def to_csv_row(self):
        return [
            self.graph.id,
            self.graph.node_count,
            self.graph.edge_count,
            self.prim.total_cost,
            round(self.prim.elapsed_time_ms, 2),
            self.prim.operations_count,
            self.kruskal.total_cost,
            round(self.kruskal.elapsed_time_ms, 2),
            self.kruskal.operations_count,
        ]


def _create_parent_dir(filename):
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)


def write_results(results, filename):
    """Write all GraphResults to a JSON file"""
    _create_parent_dir(filename)
    with open(filename, "w") as f:
        json.dump({"results": [r.to_dict() for r in results]}, f, indent=2)


def write_csv_summary(results, filename):
    """One CSV row per graph comparing cost, time and operations"""
    _create_parent_dir(filename)
    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for result in results:
            writer.writerow(result.to_csv_row())
