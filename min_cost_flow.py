from typing import List, Optional

from residual_graph import ResidualGraph
from get_augmenting_path import cheapest_path, trace_path

AUGMENT_MODES = ("bottleneck", "unit")


class AugmentingPath:
    """
    One augmentation: the vertices walked, the bottleneck residual at the time
    the path was chosen, the units actually pushed, and the per-unit cost.
    `shown` is the flow figure printed for the path: the bottleneck, or in
    unit mode the smallest bottleneck seen so far in the run.
    """

    __slots__ = ("vertices", "bottleneck", "flow", "cost", "shown")

    def __init__(
        self,
        vertices: List[int],
        bottleneck: int,
        flow: int,
        cost: int,
        shown: Optional[int] = None,
    ) -> None:
        self.vertices = vertices
        self.bottleneck = bottleneck
        self.flow = flow
        self.cost = cost
        self.shown = bottleneck if shown is None else shown

    def __repr__(self) -> str:
        return (
            f"AugmentingPath({self.vertices}, bottleneck={self.bottleneck}, "
            f"flow={self.flow}, cost={self.cost})"
        )


class FlowResult:
    __slots__ = ("graph", "paths", "max_flow", "min_cost")

    def __init__(self, graph: ResidualGraph, paths: Optional[List[AugmentingPath]] = None) -> None:
        self.graph = graph
        self.paths = paths if paths is not None else []
        self.max_flow = sum(p.flow for p in self.paths)
        self.min_cost = sum(p.flow * p.cost for p in self.paths)

    def __repr__(self) -> str:
        return (
            f"FlowResult({self.graph.name!r}, paths={len(self.paths)}, "
            f"max_flow={self.max_flow}, min_cost={self.min_cost})"
        )


def min_cost_max_flow(graph: ResidualGraph, mode: str = "bottleneck") -> FlowResult:
    """
    Successive-Shortest-Path with Bellman-Ford, mutating `graph.residual`
    until the sink is unreachable.

    Parameters
    ----------
    graph : ResidualGraph
        Source is vertex 0, sink is vertex n-1.
    mode : "bottleneck" or "unit"
        "bottleneck" pushes the full bottleneck per path. "unit" pushes a
        single unit per path, so a path of bottleneck b shows up b times,
        and reports the running minimum bottleneck as each path's flow.

    Returns
    -------
    FlowResult with the augmenting paths in the order they were found.
    """
    if mode not in AUGMENT_MODES:
        raise ValueError(f"unknown augment mode {mode!r}, expected one of {AUGMENT_MODES}")

    s, t = graph.source, graph.sink
    paths: List[AugmentingPath] = []
    running_min: Optional[int] = None
    while True:
        pred, _, found = cheapest_path(graph, s, t)
        if not found:
            break

        vertices = trace_path(pred, s, t)
        arcs = list(zip(vertices, vertices[1:]))

        # bottleneck on the path
        bottleneck = min(graph.residual_of(u, v) for u, v in arcs)
        path_cost = sum(graph.cost_of(u, v) for u, v in arcs)
        if mode == "bottleneck":
            pushed = shown = bottleneck
        else:
            pushed = 1
            running_min = bottleneck if running_min is None else min(running_min, bottleneck)
            shown = running_min

        for u, v in arcs:
            graph.saturate(u, v, pushed)

        paths.append(AugmentingPath(vertices, bottleneck, pushed, path_cost, shown))

    return FlowResult(graph, paths)
