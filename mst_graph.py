"""
Graph model for the MST comparison tool
Immutable weighted edges and an adjacency-list undirected graph
"""

import sys
from collections import deque
from dataclasses import dataclass

import networkx as nx


# Sentinels returned by min/max edge weight on a graph with no edges
NO_MIN_WEIGHT = sys.maxsize
NO_MAX_WEIGHT = -sys.maxsize - 1


class InvalidGraphInput(ValueError):
    """Raised when nodes or edges violate the graph's structural rules"""


@dataclass(frozen=True, eq=False)
class Edge:
    """Undirected weighted connection between two node identifiers"""

    source: str
    target: str
    weight: int

    def __post_init__(self):
        for name, node in (("source", self.source), ("target", self.target)):
            if not isinstance(node, str) or not node.strip():
                raise InvalidGraphInput(f"Edge {name} node must be a non-empty string")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidGraphInput(f"Edge weight must be an integer, got {self.weight!r}")
        if self.weight < 0:
            raise InvalidGraphInput(
                f"Edge {self.source}-{self.target} has negative weight {self.weight}"
            )
        if self.source == self.target:
            raise InvalidGraphInput(f"Self-loop on node {self.source} is not allowed")

    def other(self, node):
        """Return the endpoint opposite to node"""
        if node == self.source:
            return self.target
        if node == self.target:
            return self.source
        raise ValueError(f"Node {node} is not part of edge {self}")

    def connects_to(self, node):
        return node == self.source or node == self.target

    def connects(self, node1, node2):
        """True if the edge joins node1 and node2 in either direction"""
        return (self.source == node1 and self.target == node2) or (
            self.source == node2 and self.target == node1
        )

    def reversed(self):
        """Same connection seen from the other endpoint"""
        return Edge(self.target, self.source, self.weight)

    def endpoints(self):
        return frozenset((self.source, self.target))

    def to_dict(self):
        return {"from": self.source, "to": self.target, "weight": self.weight}

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight and self.endpoints() == other.endpoints()

    def __hash__(self):
        return hash((self.endpoints(), self.weight))

    # Ordering looks at weight only so that stable sorts keep input order on ties
    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __str__(self):
        return f"{self.source} -- {self.target} [weight: {self.weight}]"


class Graph:
    """
    Immutable undirected weighted graph

    Built once from an ordered node list and an edge list. Every edge is
    stored twice in the adjacency index, oriented away from each endpoint.
    Construction fails with InvalidGraphInput and never leaves a partial graph.
    """

    def __init__(self, graph_id, nodes, edges=()):
        nodes = list(nodes) if nodes is not None else []
        edges = [self._coerce_edge(edge) for edge in (edges or ())]
        self._validate(nodes, edges)

        self._id = graph_id
        self._nodes = tuple(nodes)
        self._edges = tuple(edges)

        adjacency = {node: [] for node in self._nodes}
        for edge in self._edges:
            adjacency[edge.source].append(edge)
            adjacency[edge.target].append(edge.reversed())
        self._adjacency = {node: tuple(adj) for node, adj in adjacency.items()}

    @staticmethod
    def _coerce_edge(edge):
        if isinstance(edge, Edge):
            return edge
        try:
            source, target, weight = edge
        except (TypeError, ValueError):
            raise InvalidGraphInput(
                f"Edge must be an Edge or a (from, to, weight) triple, got {edge!r}"
            ) from None
        return Edge(source, target, weight)

    @staticmethod
    def _validate(nodes, edges):
        if not nodes:
            raise InvalidGraphInput("Graph must have at least one node")

        seen = set()
        for node in nodes:
            if not isinstance(node, str) or not node.strip():
                raise InvalidGraphInput(f"Node identifier must be a non-empty string, got {node!r}")
            if node in seen:
                raise InvalidGraphInput(f"Duplicate node: {node}")
            seen.add(node)

        for edge in edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in seen:
                    raise InvalidGraphInput(f"Edge {edge} references unknown node: {endpoint}")

    @property
    def id(self):
        return self._id

    @property
    def nodes(self):
        return self._nodes

    @property
    def edges(self):
        return self._edges

    @property
    def node_count(self):
        return len(self._nodes)

    @property
    def edge_count(self):
        return len(self._edges)

    def adjacent_edges(self, node):
        """Edges incident to node, each oriented with node as its source"""
        return self._adjacency.get(node, ())

    def neighbors(self, node):
        return [edge.target for edge in self.adjacent_edges(node)]

    def degree(self, node):
        return len(self.adjacent_edges(node))

    def has_node(self, node):
        return node in self._adjacency

    def has_edge(self, node1, node2):
        return self.get_edge(node1, node2) is not None

    def get_edge(self, node1, node2):
        """First edge joining node1 and node2, or None"""
        for edge in self.adjacent_edges(node1):
            if edge.connects(node1, node2):
                return edge
        return None

    def density(self):
        """2|E| / (|V|(|V|-1)), 0.0 for graphs with at most one node"""
        v = self.node_count
        if v <= 1:
            return 0.0
        return (2.0 * self.edge_count) / (v * (v - 1))

    def total_weight(self):
        return sum(edge.weight for edge in self._edges)

    def min_edge_weight(self):
        return min((edge.weight for edge in self._edges), default=NO_MIN_WEIGHT)

    def max_edge_weight(self):
        return max((edge.weight for edge in self._edges), default=NO_MAX_WEIGHT)

    def _bfs(self, start, visited):
        component = [start]
        visited.add(start)
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for edge in self._adjacency[current]:
                if edge.target not in visited:
                    visited.add(edge.target)
                    component.append(edge.target)
                    queue.append(edge.target)
        return component

    def is_connected(self):
        """BFS from the first node reaches every node"""
        return len(self._bfs(self._nodes[0], set())) == self.node_count

    def connected_components(self):
        """Node lists of each component, discovered in node order"""
        visited = set()
        components = []
        for node in self._nodes:
            if node not in visited:
                components.append(self._bfs(node, visited))
        return components

    def statistics(self):
        has_edges = bool(self._edges)
        return {
            "id": self._id,
            "vertices": self.node_count,
            "edges": self.edge_count,
            "connected": self.is_connected(),
            "components": len(self.connected_components()),
            "density": self.density(),
            "total_weight": self.total_weight(),
            "min_edge_weight": self.min_edge_weight() if has_edges else None,
            "max_edge_weight": self.max_edge_weight() if has_edges else None,
        }

    def describe(self):
        """Multi-line summary including the adjacency list"""
        lines = [
            f"Graph {self._id}:",
            f"  Nodes: {self.node_count} {list(self._nodes)}",
            f"  Edges: {self.edge_count}",
            f"  Connected: {self.is_connected()}",
            f"  Density: {self.density():.2f}",
            f"  Total Weight: {self.total_weight()}",
            "",
            "  Adjacency List:",
        ]
        for node in self._nodes:
            adjacent = ", ".join(f"{e.target}({e.weight})" for e in self._adjacency[node])
            lines.append(f"    {node} -> {adjacent}")
        return "\n".join(lines)

    def to_networkx(self):
        """networkx.Graph copy; parallel edges collapse to the lightest one"""
        G = nx.Graph()
        G.add_nodes_from(self._nodes)
        for edge in self._edges:
            u, v = edge.source, edge.target
            if G.has_edge(u, v) and G[u][v]["weight"] <= edge.weight:
                continue
            G.add_edge(u, v, weight=edge.weight)
        return G

    def __repr__(self):
        return f"Graph(id={self._id!r}, nodes={self.node_count}, edges={self.edge_count})"

    def __str__(self):
        return (
            f"Graph {self._id} [nodes={self.node_count}, edges={self.edge_count}, "
            f"connected={self.is_connected()}]"
        )
