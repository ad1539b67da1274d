import networkx as nx


class Graph:
    """Undirected graph over integer vertices 0..V-1, stored as adjacency lists.

    Parallel edges and self-loops are kept: every add_edge call is one entry.
    """

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise ValueError("Number of vertices must be non-negative")
        self._V = num_vertices
        self._E = 0
        self._adj = [[] for _ in range(num_vertices)]

    def V(self):
        return self._V

    def E(self):
        return self._E

    def _validate_vertex(self, v):
        if v < 0 or v >= self._V:
            raise ValueError(f"vertex {v} is not between 0 and {self._V - 1}")

    def add_edge(self, v, w):
        self._validate_vertex(v)
        self._validate_vertex(w)
        self._E += 1
        self._adj[v].append(w)
        self._adj[w].append(v)

    def adj(self, v):
        """Neighbours of v, most recently added first."""
        self._validate_vertex(v)
        return tuple(reversed(self._adj[v]))

    def degree(self, v):
        self._validate_vertex(v)
        return len(self._adj[v])

    def to_networkx(self):
        g = nx.MultiGraph()
        g.add_nodes_from(range(self._V))

        # each undirected edge sits in two lists; emit it from the smaller end only
        for v in range(self._V):
            self_loops = 0
            for w in self._adj[v]:
                if w > v:
                    g.add_edge(v, w)
                elif w == v:
                    self_loops += 1
            for _ in range(self_loops // 2):
                g.add_edge(v, v)
        return g

    def __str__(self):
        lines = [f"{self._V} vertices, {self._E} edges"]
        for v in range(self._V):
            lines.append(f"{v}: " + " ".join(str(w) for w in self.adj(v)))
        return "\n".join(lines)
