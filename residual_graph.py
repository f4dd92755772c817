from typing import Iterator, Tuple

import numpy as np


class ResidualGraph:
    """
    Dense residual network over vertices 0 … n-1.
    `residual` is mutated by the flow engine; `capacity` and `cost` keep the
    input values. Reverse arcs carry the negated cost of their forward arc.
    """

    __slots__ = (
        "n",           # vertex count
        "name",        # file the graph was read from
        "capacity",    # original capacities, 0 means "no edge"
        "residual",    # remaining capacity u -> v
        "cost",        # per-unit cost, skew-symmetric on installed edges
    )

    def __init__(self, n: int, name: str = "") -> None:
        self.n = n
        self.name = name
        self.capacity = np.zeros((n, n), dtype=np.int64)
        self.residual = np.zeros((n, n), dtype=np.int64)
        self.cost = np.zeros((n, n), dtype=np.int64)

    @property
    def source(self) -> int:
        return 0

    @property
    def sink(self) -> int:
        return self.n - 1

    # ------------------------------------------------------------------ queries

    def residual_of(self, u: int, v: int) -> int:
        return int(self.residual[u, v])

    def cost_of(self, u: int, v: int) -> int:
        return int(self.cost[u, v])

    def capacity_of(self, u: int, v: int) -> int:
        return int(self.capacity[u, v])

    def forward_flow(self, u: int, v: int) -> int:
        """
        Flow currently carried by the original arc u -> v.
        """
        return max(0, int(self.capacity[u, v] - self.residual[u, v]))

    def flow_matrix(self) -> np.ndarray:
        return np.maximum(self.capacity - self.residual, 0)

    def edges(self) -> Iterator[Tuple[int, int, int, int]]:
        """
        Yield (u, v, capacity, cost) for every original arc, row-major.
        """
        for u, v in zip(*np.nonzero(self.capacity > 0)):
            yield int(u), int(v), int(self.capacity[u, v]), int(self.cost[u, v])

    def total_flow(self) -> int:
        flow = self.flow_matrix()
        return int(flow[self.source, :].sum() - flow[:, self.source].sum())

    def total_cost(self) -> int:
        flow = self.flow_matrix()
        return int((flow * self.cost)[self.capacity > 0].sum())

    # ------------------------------------------------------------------ mutation

    def saturate(self, u: int, v: int, k: int) -> None:
        """
        Push `k` units through the residual arc u -> v.
        """
        if k <= 0 or k > self.residual[u, v]:
            raise ValueError(
                f"cannot push {k} units on {u}->{v} (residual {self.residual[u, v]})"
            )
        self.residual[u, v] -= k
        self.residual[v, u] += k

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:
        return (
            f"ResidualGraph({self.name!r}, n={self.n}, "
            f"edges={int(np.count_nonzero(self.capacity))})"
        )
