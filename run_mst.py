"""
Run Prim's and Kruskal's algorithms on every graph in an input file,
print a comparison, and save JSON/CSV results and visualizations
"""

import argparse
import os
import sys

from check_mst import compare_with_networkx
from graph_io import GraphFormatError, GraphResult, read_graphs, write_csv_summary, write_results
from mst_algorithms import KruskalAlgorithm, PrimAlgorithm
from mst_graph import InvalidGraphInput
from visualize_mst import visualize_comparison, visualize_graph, visualize_mst


DEFAULT_INPUT = os.path.join("data", "input", "graphs.json")
DEFAULT_OUTPUT_JSON = os.path.join("data", "output", "results.json")
DEFAULT_OUTPUT_CSV = os.path.join("data", "output", "summary.csv")
DEFAULT_VISUALIZATION_DIR = os.path.join("data", "output", "visualizations")


def print_graph_info(graph):
    stats = graph.statistics()
    print("Graph Information:")
    print(f"  ID: {stats['id']}")
    print(f"  Vertices: {stats['vertices']}")
    print(f"  Edges: {stats['edges']}")
    print(f"  Connected: {'✓' if stats['connected'] else '✗'}")
    print(f"  Density: {stats['density']:.2f}")
    print(f"  Total Weight: {stats['total_weight']}")
    if stats["min_edge_weight"] is not None:
        print(f"  Weight Range: [{stats['min_edge_weight']}, {stats['max_edge_weight']}]")
    else:
        print("  Weight Range: n/a (no edges)")


def print_result(result):
    print(f"\n=== {result.algorithm}'s Algorithm Result ===")
    print("MST Edges:")
    for edge in result.edges:
        print(f"  {edge}")
    print(f"Total Cost: {result.total_cost}")
    print(f"Operations Count: {result.operations_count}")
    print(f"Execution Time: {result.elapsed_time_ms:.2f} ms")


def print_comparison(prim, kruskal):
    print(f"  {'Metric':<22} {'Prim':<12} {'Kruskal':<12}")
    print("  " + "-" * 46)
    print(f"  {'Total Cost':<22} {prim.total_cost:<12} {kruskal.total_cost:<12}")
    print(
        f"  {'Execution Time (ms)':<22} {prim.elapsed_time_ms:<12.2f} "
        f"{kruskal.elapsed_time_ms:<12.2f}"
    )
    print(f"  {'Operations Count':<22} {prim.operations_count:<12} {kruskal.operations_count:<12}")
    print(f"  {'MST Edges':<22} {prim.edge_count:<12} {kruskal.edge_count:<12}")

    if prim.total_cost == kruskal.total_cost:
        print("\n  Result: ✓ Same total cost")
    else:
        print("\n  Result: ✗ Different costs (ERROR!)")

    if prim.operations_count < kruskal.operations_count:
        print("  Prim's performed fewer operations")
    elif kruskal.operations_count < prim.operations_count:
        print("  Kruskal's performed fewer operations")
    else:
        print("  Both algorithms performed equal operations")


def save_visualizations(graph, prim, kruskal, visualization_dir):
    """Render all images for one graph; a failed image is reported and skipped"""
    prefix = os.path.join(visualization_dir, f"graph_{graph.id}")
    jobs = [
        ("Graph", visualize_graph, (graph, f"{prefix}_original.png")),
        (
            "Prim's MST",
            visualize_mst,
            (graph, prim.edges, "Prim's Algorithm", prim.total_cost, f"{prefix}_prim.png"),
        ),
        (
            "Kruskal's MST",
            visualize_mst,
            (
                graph,
                kruskal.edges,
                "Kruskal's Algorithm",
                kruskal.total_cost,
                f"{prefix}_kruskal.png",
            ),
        ),
        ("Comparison", visualize_comparison, (graph, prim, kruskal, f"{prefix}_comparison.png")),
    ]

    saved = []
    for label, render, args in jobs:
        try:
            saved.append(render(*args))
            print(f"  {label} visualization saved: {args[-1]}")
        except (OSError, ValueError) as e:
            print(f"  Could not save {label} visualization: {e}", file=sys.stderr)
    return saved


def process_graph(graph, visualization_dir=None, check=False):
    """Run both algorithms on one graph and print the comparison"""
    print("=" * 70)
    print(f"Processing {graph}\n")
    print_graph_info(graph)

    if not graph.is_connected():
        components = len(graph.connected_components())
        print(f"\nWARNING: Graph is disconnected ({components} components)")
        print("   Result is a minimum spanning forest.")

    prim = PrimAlgorithm().execute(graph)
    print_result(prim)

    kruskal = KruskalAlgorithm().execute(graph)
    print_result(kruskal)

    print("\nAlgorithm Comparison:")
    print_comparison(prim, kruskal)

    if check:
        for result in (prim, kruskal):
            verdict = compare_with_networkx(graph, result)
            status = "✓" if verdict["is_correct"] else "✗"
            print(
                f"  {status} {result.algorithm} vs networkx: "
                f"{verdict['total_cost']} / {verdict['expected_weight']}"
            )

    if visualization_dir:
        print()
        save_visualizations(graph, prim, kruskal, visualization_dir)

    print()
    return GraphResult(graph, prim, kruskal)


def run(
    input_file,
    output_json=DEFAULT_OUTPUT_JSON,
    output_csv=DEFAULT_OUTPUT_CSV,
    visualization_dir=DEFAULT_VISUALIZATION_DIR,
    check=False,
):
    """Load every graph, process each one, then write JSON and CSV results"""
    print(f"Reading graphs from: {input_file}")
    graphs = read_graphs(input_file)
    print(f"✓ Successfully loaded {len(graphs)} graph(s)\n")

    results = [process_graph(graph, visualization_dir, check) for graph in graphs]

    print("=" * 70)
    print("Saving results...\n")
    write_results(results, output_json)
    print(f"✓ JSON results written to: {output_json}")
    write_csv_summary(results, output_csv)
    print(f"✓ CSV summary written to: {output_csv}")
    if visualization_dir:
        print(f"✓ Visualizations saved to: {visualization_dir}")

    return results


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Compare Prim's and Kruskal's minimum spanning tree algorithms"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Graph input JSON file (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--output-json",
        default=DEFAULT_OUTPUT_JSON,
        help=f"Results JSON file (default: {DEFAULT_OUTPUT_JSON})",
    )
    parser.add_argument(
        "--output-csv",
        default=DEFAULT_OUTPUT_CSV,
        help=f"Summary CSV file (default: {DEFAULT_OUTPUT_CSV})",
    )
    parser.add_argument(
        "--visualization-dir",
        default=DEFAULT_VISUALIZATION_DIR,
        help=f"Directory for PNG images (default: {DEFAULT_VISUALIZATION_DIR})",
    )
    parser.add_argument(
        "--no-visualize", action="store_true", help="Skip rendering images"
    )
    parser.add_argument(
        "--check", action="store_true", help="Cross-check each result against networkx"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    print("=" * 70)
    print(" " * 12 + "MST Comparison - Prim's & Kruskal's Algorithms")
    print("=" * 70)

    try:
        run(
            args.input,
            output_json=args.output_json,
            output_csv=args.output_csv,
            visualization_dir=None if args.no_visualize else args.visualization_dir,
            check=args.check,
        )
    except (FileNotFoundError, GraphFormatError, InvalidGraphInput) as e:
        print(f"\nERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"\nERROR: file access failed: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 70)
    print("Processing complete!")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
