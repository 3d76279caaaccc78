#!/usr/bin/env python3
"""
Simple demo script showing clearing map generation.
"""

from py_clearings.config import GenerationSettings, get_layout, list_layouts
from py_clearings.config.log_setup import configure_logging
from py_clearings.core.alea_prng import AleaPRNG
from py_clearings.core.layout_analysis import degree_counts, find_conflicts, summarize
from py_clearings.core.layout_generator import generate_layout


def main():
    """Demonstrate clearing map generation."""
    configure_logging("WARNING", "console")

    print("Py-Clearings Map Generation Demo")
    print("=" * 40)

    width, height = 800, 600
    settings = GenerationSettings(min_connections=2, max_connections=4, max_attempts=100,
                                  use_named_titles=True)

    for layout_name in list_layouts():
        print(f"\n{layout_name.upper()} Layout:")
        print("-" * 30)

        result = generate_layout(width, height, settings, prng=AleaPRNG(f"{layout_name}_demo"),
                                 layout_name=layout_name)
        summary = summarize(result, settings)

        print(f"  Attempts: {result.attempts}")
        print(f"  Clearings: {summary['node_count']}, paths: {summary['edge_count']}")
        print(f"  Degree range: {summary['min_degree']}-{summary['max_degree']} "
              f"(mean {summary['mean_degree']:.2f})")
        print(f"  Connected: {summary['connected']}")
        print(f"  Conflicting paths: {len(find_conflicts(result, get_layout(layout_name)))}")
        if result.error:
            print(f"  Warning: {result.error}")

        degrees = degree_counts(result)
        for node, degree in zip(result.nodes, degrees):
            print(f"    {node.title:<14} ({node.x:6.1f}, {node.y:6.1f})  {'#' * int(degree)}")

        print("  Paths:")
        for edge in result.edges:
            print(f"    {edge.source.title} - {edge.target.title}")

    # Unsatisfiable bounds still return a map, flagged with a warning
    print("\n\nSoft failure example:")
    print("-" * 30)
    strict = GenerationSettings(min_connections=12, max_connections=12, max_attempts=3)
    result = generate_layout(width, height, strict, prng=AleaPRNG("strict"), layout_name="grid")
    print(f"  Paths: {len(result.edges)}")
    print(f"  Error: {result.error}")


if __name__ == "__main__":
    main()
