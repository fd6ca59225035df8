"""
Render input graphs and spanning forests to PNG files
"""

import os

import matplotlib.pyplot as plt
import networkx as nx


def _layout(nx_graph):
    return nx.spring_layout(nx_graph, seed=42)


def _prepare_output(save_path):
    directory = os.path.dirname(save_path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def _forest_graph(graph, mst_edges):
    """networkx graph with every node of graph and only the forest edges"""
    forest = nx.Graph()
    forest.add_nodes_from(graph.nodes)
    for edge in mst_edges:
        forest.add_edge(edge.source, edge.target, weight=edge.weight)
    return forest


def _draw_base(nx_graph, pos, ax, node_color):
    nx.draw(
        nx_graph,
        pos,
        ax=ax,
        with_labels=True,
        node_color=node_color,
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="lightgray",
        width=2,
    )
    edge_labels = nx.get_edge_attributes(nx_graph, "weight")
    if edge_labels:
        nx.draw_networkx_edge_labels(nx_graph, pos, edge_labels, ax=ax, font_size=10)


def _draw_forest(graph, mst_edges, pos, ax, title):
    """Full graph in gray with the forest edges drawn over it in red"""
    _draw_base(graph.to_networkx(), pos, ax, "lightgreen")
    if mst_edges:
        forest = _forest_graph(graph, mst_edges)
        nx.draw_networkx_edges(forest, pos, ax=ax, edge_color="red", width=3)
    ax.set_title(title, fontsize=14, fontweight="bold")


def visualize_graph(graph, save_path):
    """Draw the input graph with its edge weights"""
    _prepare_output(save_path)
    nx_graph = graph.to_networkx()
    pos = _layout(nx_graph)

    fig, ax = plt.subplots(figsize=(10, 8))
    _draw_base(nx_graph, pos, ax, "lightblue")
    ax.set_title(
        f"Graph {graph.id} - {graph.node_count} nodes, {graph.edge_count} edges",
        fontsize=14,
        fontweight="bold",
    )

    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path


def visualize_mst(graph, mst_edges, algorithm_name, total_cost, save_path):
    """Draw the graph with the spanning forest highlighted"""
    _prepare_output(save_path)
    pos = _layout(graph.to_networkx())

    fig, ax = plt.subplots(figsize=(10, 8))
    _draw_forest(
        graph, mst_edges, pos, ax, f"Graph {graph.id} - {algorithm_name} (cost {total_cost})"
    )

    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path


def visualize_comparison(graph, prim_result, kruskal_result, save_path):
    """Prim's and Kruskal's forests side by side on the same layout"""
    _prepare_output(save_path)
    pos = _layout(graph.to_networkx())

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
    _draw_forest(
        graph, prim_result.edges, pos, ax1, f"Prim's Algorithm (cost {prim_result.total_cost})"
    )
    _draw_forest(
        graph,
        kruskal_result.edges,
        pos,
        ax2,
        f"Kruskal's Algorithm (cost {kruskal_result.total_cost})",
    )

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path
