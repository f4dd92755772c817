from typing import List, Tuple

from residual_graph import ResidualGraph


INF = 10**18  # "∞" large enough for all problem sizes

def cheapest_path(
    graph: ResidualGraph,
    s: int,
    t: int,
) -> Tuple[List[int], List[int], bool]:
    """
    Bellman-Ford over the residual arcs with positive capacity.
    Reverse arcs carry negative costs, so Dijkstra is not an option here.
    Returns (pred, dist, found_flag). Reachability is read from dist:
    pred[t] == 0 is also what a direct s -> t arc leaves behind.
    """
    n = graph.n
    residual = graph.residual.tolist()
    cost = graph.cost.tolist()

    dist = [INF] * n
    pred = [0] * n
    dist[s] = 0

    for _ in range(n):
        for u in range(n):
            if dist[u] == INF:
                continue
            for v in range(n):
                if residual[u][v] > 0 and dist[u] + cost[u][v] < dist[v]:
                    dist[v] = dist[u] + cost[u][v]
                    pred[v] = u

    return pred, dist, s != t and dist[t] != INF


def trace_path(pred: List[int], s: int, t: int) -> List[int]:
    """
    Walk `pred` back from t and return the vertices [s, …, t].
    A walk longer than n vertices means pred holds a negative cycle.
    """
    path = [t]
    v = t
    while v != s:
        v = pred[v]
        path.append(v)
        if len(path) > len(pred):
            raise ValueError(f"predecessor chain from {t} does not reach {s}: negative cycle")
    path.reverse()
    return path
