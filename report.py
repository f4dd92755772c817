from typing import List

import numpy as np
import pandas as pd

from residual_graph import ResidualGraph
from min_cost_flow import AugmentingPath, FlowResult, min_cost_max_flow


def format_header(name: str) -> str:
    return "\n************ Find Flow " + name + " ***************************"


def print_matrix(label: str, m: np.ndarray) -> str:
    """
    Render an n x n matrix with row and column indices, 5 characters per cell.
    """
    n = len(m)
    lines = ["\n " + label + " \n     " + "".join(f"{i:5d}" for i in range(n))]
    for i in range(n):
        lines.append(f"{i:5d}" + "".join(f"{int(x):5d}" for x in m[i]))
    return "\n".join(lines) + "\n"


def format_path(path: AugmentingPath) -> str:
    route = " -> ".join(str(v) for v in path.vertices)
    return f"({route}) ({path.shown}) ${path.cost}"


def flow_table(graph: ResidualGraph) -> pd.DataFrame:
    """
    Every original arc carrying flow, row-major.

    Returns:
        DataFrame with columns from, to, capacity, flow, cost
    """
    rows: List[List[int]] = []
    for u, v, cap, cost in graph.edges():
        flow = graph.forward_flow(u, v)
        if flow > 0:
            rows.append([u, v, cap, flow, cost])
    return pd.DataFrame(rows, columns=["from", "to", "capacity", "flow", "cost"], dtype=int)


def path_table(result: FlowResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            [" -> ".join(str(v) for v in p.vertices), p.bottleneck, p.flow, p.cost]
            for p in result.paths
        ],
        columns=["path", "bottleneck", "flow", "cost"],
    )


def format_flows(graph: ResidualGraph) -> List[str]:
    """
    One line per arc with flow; zero and negative cost arcs are left out.
    """
    df = flow_table(graph)
    df = df[df["cost"] > 0]
    return [
        f"Flow {row['from']} -> {row['to']} ({row['capacity']}) ${row['cost']}"
        for _, row in df.iterrows()
    ]


def report_run(graph: ResidualGraph, mode: str = "bottleneck") -> FlowResult:
    """
    Print the cost and capacity matrices, solve, then print every augmenting
    path, the resulting flows and the final residual matrix.
    """
    print(print_matrix("Edge Cost", graph.cost))
    print(print_matrix("Capacity", graph.capacity))
    result = min_cost_max_flow(graph, mode)
    for path in result.paths:
        print(format_path(path))
    for line in format_flows(graph):
        print(line)
    print(print_matrix("Residual", graph.residual))
    return result
