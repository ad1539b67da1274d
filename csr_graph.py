import numpy as np


class CSRGraph:
    def __init__(self, graph):
        self.graph = graph
        n = graph.V()

        degrees = np.fromiter((graph.degree(v) for v in range(n)), dtype=np.int64, count=n)
        self.indptr = np.zeros(n + 1, dtype=np.int64)
        np.cumsum(degrees, out=self.indptr[1:])

        self.indices = np.empty(int(self.indptr[-1]), dtype=np.int64)
        for v in range(n):
            self.indices[self.indptr[v]:self.indptr[v + 1]] = graph.adj(v)

        print(f"✅ CSRGraph initialized with {n} nodes, {len(self.indices)} adjacency entries.")

    @property
    def num_vertices(self):
        return len(self.indptr) - 1

    @property
    def num_entries(self):
        return len(self.indices)

    def neighbors(self, v):
        if v < 0 or v >= self.num_vertices:
            raise ValueError(f"vertex {v} is not between 0 and {self.num_vertices - 1}")
        return self.indices[self.indptr[v]:self.indptr[v + 1]]

    def degrees(self):
        return np.diff(self.indptr)
