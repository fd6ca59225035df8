"""
Create input files for the MST comparison tool
Random weighted graphs (Erdos-Renyi) plus a small set of reference graphs
"""

import argparse
import random

import networkx as nx

from graph_io import write_graphs
from mst_graph import Graph


def node_label(index):
    """0 -> A, 25 -> Z, 26 -> AA, ..."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def create_random_graph(num_nodes=6, edge_probability=0.5, seed=42, max_weight=10, connected=True):
    """Create a random networkx graph with integer weights in [1, max_weight]"""
    rng = random.Random(seed)

    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    if connected and num_nodes > 1 and not nx.is_connected(G):
        # Chain the components together
        components = [sorted(c) for c in nx.connected_components(G)]
        components.sort()
        for i in range(len(components) - 1):
            G.add_edge(components[i][0], components[i + 1][0])

    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, max_weight)

    return nx.relabel_nodes(G, {i: node_label(i) for i in G.nodes()})


def networkx_to_graph(G, graph_id):
    """Convert a weighted networkx graph to a Graph, keeping node order"""
    edges = [(u, v, d["weight"]) for u, v, d in G.edges(data=True)]
    return Graph(graph_id, list(G.nodes()), edges)


def sample_graphs():
    """Small graphs with known MST costs"""
    return [
        Graph(
            1,
            ["A", "B", "C", "D", "E"],
            [
                ("A", "B", 4),
                ("A", "C", 3),
                ("B", "C", 2),
                ("B", "D", 5),
                ("C", "D", 7),
                ("C", "E", 8),
                ("D", "E", 6),
            ],
        ),
        Graph(2, ["X", "Y", "Z"], [("X", "Y", 1), ("Y", "Z", 2), ("X", "Z", 3)]),
        Graph(3, ["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 2)]),
        Graph(4, ["A"], []),
    ]


def generate_graphs(count, num_nodes, edge_probability, seed, max_weight=10, connected=True):
    """count random graphs, ids starting at 1, seeds derived from seed"""
    graphs = []
    for i in range(count):
        G = create_random_graph(num_nodes, edge_probability, seed + i, max_weight, connected)
        graphs.append(networkx_to_graph(G, i + 1))
    return graphs


def print_graph_summary(graph):
    """Print summary of the graph"""
    G = graph.to_networkx()
    mst = nx.minimum_spanning_tree(G, weight="weight")
    mst_weight = sum(data["weight"] for _, _, data in mst.edges(data=True))

    print(
        f"  Graph {graph.id:<4} nodes {graph.node_count:<5} edges {graph.edge_count:<6} "
        f"connected {str(graph.is_connected()):<6} expected MST weight {mst_weight}"
    )


def main(argv=None):
    """Main function to create the graph input file"""
    parser = argparse.ArgumentParser(description="Generate graph input files for the MST tool")
    parser.add_argument("--count", type=int, default=5, help="Number of graphs (default: 5)")
    parser.add_argument("--nodes", type=int, default=10, help="Nodes per graph (default: 10)")
    parser.add_argument(
        "--edge-prob", type=float, default=0.4, help="Edge probability (default: 0.4)"
    )
    parser.add_argument(
        "--max-weight", type=int, default=20, help="Largest edge weight (default: 20)"
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--allow-disconnected",
        action="store_true",
        help="Keep disconnected random graphs instead of joining their components",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Write the reference graphs instead of random ones",
    )
    parser.add_argument(
        "--output",
        default="data/input/graphs.json",
        help="Output file (default: data/input/graphs.json)",
    )
    args = parser.parse_args(argv)

    print("=" * 70)
    print("Graph Input Generator")
    print("=" * 70)

    if args.sample:
        graphs = sample_graphs()
    else:
        print(f"  Graphs: {args.count}")
        print(f"  Nodes: {args.nodes}")
        print(f"  Edge probability: {args.edge_prob}")
        print(f"  Random seed: {args.seed}\n")
        graphs = generate_graphs(
            args.count,
            args.nodes,
            args.edge_prob,
            args.seed,
            args.max_weight,
            connected=not args.allow_disconnected,
        )

    for graph in graphs:
        print_graph_summary(graph)

    write_graphs(graphs, args.output)
    print(f"\n{len(graphs)} graph(s) written to {args.output}")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
