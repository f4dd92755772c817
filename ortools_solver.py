from typing import Tuple
import numpy as np
from ortools.graph.python import max_flow, min_cost_flow

from residual_graph import ResidualGraph


def ortools_solver(graph: ResidualGraph) -> Tuple[int, int]:
    """
    Independent min-cost max-flow on the original arcs of `graph`.
    Max flow value from SimpleMaxFlow, then the cheapest way to ship that
    much from source to sink with SimpleMinCostFlow.

    Returns (max_flow, min_cost).
    """
    edges = list(graph.edges())
    if not edges or graph.source == graph.sink:
        return 0, 0

    # Define four parallel arrays: from-node, to-node, capacities, and unit costs.
    start_nodes = np.array([edge[0] for edge in edges])
    end_nodes = np.array([edge[1] for edge in edges])
    capacities = np.array([edge[2] for edge in edges])
    unit_costs = np.array([edge[3] for edge in edges])

    if graph.source not in start_nodes or graph.sink not in end_nodes:
        return 0, 0

    smf = max_flow.SimpleMaxFlow()
    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)
    status = smf.solve(graph.source, graph.sink)
    if status != smf.OPTIMAL:
        raise RuntimeError(f"max flow solver failed with status {status}")
    flow_value = smf.optimal_flow()
    if flow_value == 0:
        return 0, 0

    smcf = min_cost_flow.SimpleMinCostFlow()
    smcf.add_arcs_with_capacity_and_unit_cost(
        start_nodes, end_nodes, capacities, unit_costs
    )
    smcf.set_node_supply(graph.source, flow_value)
    smcf.set_node_supply(graph.sink, -flow_value)

    status = smcf.solve()
    if status != smcf.OPTIMAL:
        raise RuntimeError(f"min cost flow solver failed with status {status}")
    return int(flow_value), int(smcf.optimal_cost())
