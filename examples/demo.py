#!/usr/bin/env python3
"""Demo: Using FortRaid as a Python library.

This shows how to use FortRaid programmatically, not just as a CLI tool.
"""

from fortraid.graph import FortFlags, FortGraph, format_graph, generate_forest
from fortraid.strategy import compare, replay, score, solve


def main():
    # 1. Build a small graph by hand
    graph = FortGraph()
    graph.add_vertex("A", 10)
    graph.add_vertex("B!", 10, FortFlags(self_alert=True))
    graph.add_vertex("C", 10)
    graph.add_edge("A", "B!")
    graph.add_edge("B!", "C")

    print("Graph in text form:")
    print(format_graph(graph))

    # 2. Solve it exactly
    plan = solve(graph)
    print(f"Best ordering: {list(plan.ordering)} collects {plan.value}")

    # 3. Check any ordering with the verifier
    naive = ["B!", "A", "C"]
    print(f"Ordering {naive} collects {score(graph, naive)}")
    for step in replay(graph, plan.ordering):
        state = "alerted" if step.alerted else "calm"
        print(f"  {step.label}: {step.collected} ({state})")

    # 4. Compare strategies on a random forest
    forest = generate_forest(8, seed=1)
    print("\n--- Strategy comparison on a random forest ---")
    for result in compare(forest):
        print(f"  {result.strategy:12} {result.value}")


if __name__ == "__main__":
    main()
