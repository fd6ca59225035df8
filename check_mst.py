"""
Cross-check MST results against networkx.minimum_spanning_tree
"""

import argparse

import networkx as nx

from graph_io import read_graphs
from mst_algorithms import KruskalAlgorithm, PrimAlgorithm, find_cycle_edges


def compare_with_networkx(graph, result):
    """Compare one AlgorithmResult with the networkx minimum spanning forest"""
    G = graph.to_networkx()
    expected = nx.minimum_spanning_tree(G, weight="weight")
    expected_weight = sum(d["weight"] for _, _, d in expected.edges(data=True))

    forest = nx.Graph()
    forest.add_nodes_from(graph.nodes)
    forest.add_edges_from((e.source, e.target) for e in result.edges)

    acyclic = not find_cycle_edges(result.edges)
    components = nx.number_connected_components(forest)
    expected_components = nx.number_connected_components(G)

    return {
        "algorithm": result.algorithm,
        "total_cost": result.total_cost,
        "expected_weight": expected_weight,
        "edges_found": result.edge_count,
        "edges_expected": expected.number_of_edges(),
        "acyclic": acyclic,
        "components": components,
        "expected_components": expected_components,
        "is_correct": (
            result.total_cost == expected_weight
            and result.edge_count == expected.number_of_edges()
            and acyclic
            and components == expected_components
        ),
    }


def print_check(graph, check):
    status = "✓ CORRECT" if check["is_correct"] else "✗ INCORRECT"
    print(
        f"Graph {graph.id:<5} {check['algorithm']:<8} "
        f"cost {check['total_cost']:<6} expected {check['expected_weight']:<6} "
        f"edges {check['edges_found']}/{check['edges_expected']:<4} {status}"
    )


def check_file(filename):
    """Run both algorithms on every graph in filename; True if all match networkx"""
    all_correct = True
    for graph in read_graphs(filename):
        for algorithm in (PrimAlgorithm(), KruskalAlgorithm()):
            check = compare_with_networkx(graph, algorithm.execute(graph))
            print_check(graph, check)
            all_correct = all_correct and check["is_correct"]
    return all_correct


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Verify Prim's and Kruskal's results against networkx"
    )
    parser.add_argument("input", help="Graph input JSON file")
    args = parser.parse_args(argv)

    ok = check_file(args.input)
    print(f"\nOverall: {'✓ all results match' if ok else '✗ mismatches found'}")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
