from typing import Dict, Any, Optional, List
import networkx as nx
import pandas as pd
import pulp as pl
from pulp import LpProblem, LpMinimize, LpVariable, lpSum, LpStatus

from residual_graph import ResidualGraph


def to_networkx(graph: ResidualGraph) -> nx.DiGraph:
    """
    Original arcs of `graph` as a DiGraph with `capacity` and `weight`
    edge attributes. Every vertex is present, isolated or not.
    """
    G = nx.DiGraph(name=graph.name)
    G.add_nodes_from(range(graph.n))
    for u, v, cap, cost in graph.edges():
        G.add_edge(u, v, capacity=cap, weight=cost)
    return G


class FlowSolver:
    """
    Min-cost max-flow as a linear program.

    Attributes:
        graph (nx.DiGraph): arcs with `capacity` and `weight` attributes
        source, sink: terminal vertices
        flow_value (int): max flow value, fixed before the LP is built
        problem (LpProblem): The linear programming problem
        flow_vars (Dict[tuple, LpVariable]): Flow variables for each edge
    """

    def __init__(self, G: nx.DiGraph, source: int, sink: int) -> None:
        self.graph = G
        self.source = source
        self.sink = sink
        self.flow_value = 0
        self.problem = LpProblem("Min_Cost_Max_Flow", LpMinimize)
        self.flow_vars: Dict[tuple, LpVariable] = {}
        self._solution: Optional[Dict[str, Any]] = None

    def build_model(self) -> None:
        if not self.graph.number_of_edges():
            return
        if self.source != self.sink:
            self.flow_value = nx.maximum_flow_value(self.graph, self.source, self.sink)
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()

    def _add_flow_vars(self) -> None:
        """
        One variable per arc, bounded by its capacity.
        """
        for u, v, data in self.graph.edges(data=True):
            var = LpVariable(f"f_{u}_{v}", lowBound=0, upBound=data['capacity'])
            self.flow_vars[(u, v)] = var

    def _add_objective(self) -> None:
        """
        Total Cost = Σ (flow on edge × unit cost of edge)
        """
        self.problem += lpSum(
            self.flow_vars[(u, v)] * data['weight']
            for u, v, data in self.graph.edges(data=True)
        )

    def _add_flow_conservation_constraints(self) -> None:
        """
        outflow - inflow is flow_value at the source, -flow_value at the sink
        and 0 everywhere else.
        """
        for node in self.graph.nodes():
            if self.graph.degree(node) == 0:
                continue
            inflow = lpSum(self.flow_vars[(u, node)] for u in self.graph.predecessors(node))
            outflow = lpSum(self.flow_vars[(node, v)] for v in self.graph.successors(node))
            if node == self.source:
                balance = self.flow_value
            elif node == self.sink:
                balance = -self.flow_value
            else:
                balance = 0
            self.problem += (outflow - inflow == balance)

    def solve(self) -> Dict[str, Any]:
        """
        Solve the optimization problem.

        Returns:
            Dict containing:
                - status: Solution status
                - flow_value: max flow value the LP ships
                - objective_value: Optimal objective value
                - flows: Dictionary of edge flows
        Raises:
            RuntimeError: If model hasn't been built
        """
        if not self.flow_vars and self.graph.number_of_edges():
            raise RuntimeError("Model must be built before solving")

        if not self.flow_vars:
            self._solution = {
                'status': 'Optimal',
                'flow_value': 0,
                'objective_value': 0,
                'flows': {},
            }
            return self._solution

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != 1:
            print(f"Solver status: {LpStatus[status]}")
            self._solution = {
                'status': LpStatus[status],
                'flow_value': self.flow_value,
                'objective_value': None,
                'flows': None,
            }
            return self._solution

        self._solution = {
            'status': 'Optimal',
            'flow_value': self.flow_value,
            'objective_value': round(pl.value(self.problem.objective) or 0),
            'flows': {
                edge: round(var.value() or 0)
                for edge, var in self.flow_vars.items()
            },
        }
        return self._solution

    def get_result_df(self) -> pd.DataFrame:
        """
        Generate a DataFrame with the solution results.

        Returns:
            DataFrame containing positive flows with columns from, to, flow, cost
        """
        if not self._solution or self._solution['status'] != 'Optimal':
            raise RuntimeError("No optimal solution available")

        results: List[List] = []
        for (u, v), flow in self._solution['flows'].items():
            if flow > 0:
                results.append([int(u), int(v), flow, self.graph[u][v]['weight']])

        return pd.DataFrame(results, columns=["from", "to", "flow", "cost"])
