from residual_graph import ResidualGraph

def add_edge(graph: ResidualGraph, u: int, v: int, cap: int, cost: int) -> bool:
    """
    Install arc u -> v and the negated cost on its reverse residual arc.
    A self-loop keeps its own cost; it has no separate reverse arc.
    Returns False, leaving the graph untouched, if an endpoint is out of range.
    """
    if u < 0 or u >= graph.n:
        return False
    if v < 0 or v >= graph.n:
        return False
    graph.capacity[u, v] = cap
    graph.residual[u, v] = cap
    graph.cost[u, v] = cost
    if u != v:
        graph.cost[v, u] = -cost
    return True
