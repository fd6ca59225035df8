"""
Prim's and Kruskal's Minimum Spanning Tree algorithms
Both build a minimum spanning forest when the input graph is disconnected
"""

import heapq
import itertools
import time
from dataclasses import dataclass

from mst_graph import Graph


class UnionFind:
    """
    Disjoint-set forest with full path compression and union by rank

    Keeps its own operation counter so Kruskal's algorithm can report the
    work done inside the structure.
    """

    def __init__(self, nodes):
        self._parent = {}
        self._rank = {}
        self.operations_count = 0
        self.set_count = 0

        for node in nodes:
            self._parent[node] = node
            self._rank[node] = 0
            self.set_count += 1
            self.operations_count += 1

    def rank(self, node):
        return self._rank[node]

    def find(self, node):
        """Return the root of node's set, pointing every node on the path at it"""
        self.operations_count += 1

        root = node
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[node] != root:
            next_node = self._parent[node]
            self._parent[node] = root
            self.operations_count += 1
            node = next_node

        return root

    def connected(self, node1, node2):
        self.operations_count += 1
        return self.find(node1) == self.find(node2)

    def union(self, node1, node2):
        """Merge the two sets; returns False if they were already one set"""
        root1 = self.find(node1)
        root2 = self.find(node2)
        self.operations_count += 1

        if root1 == root2:
            return False

        rank1 = self._rank[root1]
        rank2 = self._rank[root2]
        if rank1 < rank2:
            self._parent[root1] = root2
        elif rank1 > rank2:
            self._parent[root2] = root1
        else:
            # Equal ranks: node2's root always goes under node1's root
            self._parent[root2] = root1
            self._rank[root1] = rank1 + 1

        self.set_count -= 1
        self.operations_count += 2
        return True


def find_cycle_edges(edges):
    """Edges that close a cycle when the edge set is replayed through a fresh UnionFind"""
    edges = list(edges)
    nodes = []
    for edge in edges:
        nodes.extend((edge.source, edge.target))
    uf = UnionFind(dict.fromkeys(nodes))

    return [edge for edge in edges if not uf.union(edge.source, edge.target)]


@dataclass(frozen=True)
class AlgorithmResult:
    """Outcome of one algorithm run"""

    algorithm: str
    edges: tuple = ()
    total_cost: int = 0
    operations_count: int = 0
    elapsed_time_ms: float = 0.0

    @property
    def edge_count(self):
        return len(self.edges)

    def to_dict(self):
        return {
            "mst_edges": [edge.to_dict() for edge in self.edges],
            "total_cost": self.total_cost,
            "operations_count": self.operations_count,
            "execution_time_ms": round(self.elapsed_time_ms, 2),
        }


class MSTAlgorithm:
    """Shared bookkeeping for the MST algorithms"""

    name = None

    def __init__(self):
        self._result = AlgorithmResult(self.name)

    def execute(self, graph):
        """Run on graph, keep the outcome as the last result and return it"""
        if not isinstance(graph, Graph):
            raise TypeError(f"{self.name} expects a Graph, got {type(graph).__name__}")

        start_time = time.perf_counter()
        edges, total_cost, operations = self._build_forest(graph)
        elapsed_ms = (time.perf_counter() - start_time) * 1000.0

        self._result = AlgorithmResult(
            algorithm=self.name,
            edges=tuple(edges),
            total_cost=total_cost,
            operations_count=operations,
            elapsed_time_ms=elapsed_ms,
        )
        return self._result

    def _build_forest(self, graph):
        raise NotImplementedError

    @property
    def result(self):
        return self._result

    def mst_edges(self):
        return list(self._result.edges)

    def total_cost(self):
        return self._result.total_cost

    def operations_count(self):
        return self._result.operations_count

    def elapsed_time_ms(self):
        return self._result.elapsed_time_ms


class PrimAlgorithm(MSTAlgorithm):
    """
    Lazy Prim's algorithm with restarts

    Every node not yet reached starts a new tree, so a disconnected graph
    yields one spanning tree per component. Stale queue entries are skipped
    when popped instead of being removed on update.
    """

    name = "Prim"

    def _build_forest(self, graph):
        nodes = graph.nodes
        forest = []
        total_cost = 0
        operations = 0

        if not nodes:
            return forest, total_cost, operations

        visited = set()
        # Insertion sequence breaks weight ties in push order
        sequence = itertools.count()

        for start_node in nodes:
            if start_node in visited:
                continue

            visited.add(start_node)
            operations += 1

            queue = []
            for edge in graph.adjacent_edges(start_node):
                heapq.heappush(queue, (edge.weight, next(sequence), edge))
                operations += 1

            while queue and len(visited) < len(nodes):
                _, _, edge = heapq.heappop(queue)
                operations += 1

                if edge.target in visited:
                    operations += 1
                    continue

                forest.append(edge)
                total_cost += edge.weight
                visited.add(edge.target)
                operations += 2

                for adjacent in graph.adjacent_edges(edge.target):
                    if adjacent.target not in visited:
                        heapq.heappush(queue, (adjacent.weight, next(sequence), adjacent))
                        operations += 1
                    operations += 1

        return forest, total_cost, operations


class KruskalAlgorithm(MSTAlgorithm):
    """Kruskal's algorithm over a stable weight sort, cycles rejected with UnionFind"""

    name = "Kruskal"

    def _build_forest(self, graph):
        nodes = graph.nodes
        edges = graph.edges
        forest = []
        total_cost = 0
        operations = 0

        if not nodes or not edges:
            return forest, total_cost, operations

        uf = UnionFind(nodes)

        sorted_edges = sorted(edges)
        operations += len(sorted_edges)

        for edge in sorted_edges:
            operations += 1

            if not uf.connected(edge.source, edge.target):
                forest.append(edge)
                total_cost += edge.weight
                uf.union(edge.source, edge.target)
                operations += 2

                # Only reachable on a connected graph
                if len(forest) == len(nodes) - 1:
                    break
            operations += 1

        operations += uf.operations_count
        return forest, total_cost, operations
