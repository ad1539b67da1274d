import re

import networkx as nx

from graph import Graph


class SymbolGraph:
    """Undirected graph whose vertices are named by arbitrary strings.

    Each input line holds a vertex name followed by the names of its
    neighbours, separated by ``delimiter`` (a regular expression). Names get
    indices 0..V-1 in first-seen order; the underlying ``Graph`` uses them.
    """

    def __init__(self, filename: str, delimiter: str = " "):
        print(f"📦 Loading symbol graph from {filename} ...")
        with open(filename, "r", encoding="utf-8") as infile:
            lines = infile.readlines()
        self._build(lines, delimiter, filename)

    @classmethod
    def from_lines(cls, lines, delimiter=" ", source="<lines>"):
        """Build from any iterable of lines; it is buffered, so streams work."""
        sg = cls.__new__(cls)
        sg._build(list(lines), delimiter, source)
        return sg

    def _build(self, lines, delimiter, source):
        self._st = {}    # name -> index
        self._keys = []  # index -> name

        records = [fields for fields in (self._split(line, delimiter) for line in lines) if fields]

        # first pass: index every distinct name
        for fields in records:
            for name in fields:
                if name not in self._st:
                    self._st[name] = len(self._keys)
                    self._keys.append(name)

        # second pass: connect the first vertex on each line to all the others
        self._graph = Graph(len(self._keys))
        for fields in records:
            v = self._st[fields[0]]
            for name in fields[1:]:
                self._graph.add_edge(v, self._st[name])

        print(f"✅ SymbolGraph initialized from {source}: {self._graph.V()} vertices, {self._graph.E()} edges.")

    @staticmethod
    def _split(line, delimiter):
        line = line.rstrip("\r\n")
        if not line:
            return []
        fields = re.split(delimiter, line)
        while fields and fields[-1] == "":
            fields.pop()
        return fields

    def contains(self, name):
        return name in self._st

    def __contains__(self, name):
        return self.contains(name)

    def __len__(self):
        return len(self._keys)

    def index_of(self, name):
        try:
            return self._st[name]
        except KeyError:
            raise KeyError(f"unknown vertex name: {name!r}") from None

    def name_of(self, index):
        self._validate_vertex(index)
        return self._keys[index]

    def names(self):
        return tuple(self._keys)

    def graph(self):
        """The underlying graph. Callers must not mutate it."""
        return self._graph

    def adjacent_names(self, name):
        return [self._keys[w] for w in self._graph.adj(self.index_of(name))]

    def to_networkx(self):
        return nx.relabel_nodes(self._graph.to_networkx(), dict(enumerate(self._keys)))

    def _validate_vertex(self, v):
        n = self._graph.V()
        if v < 0 or v >= n:
            raise ValueError(f"vertex {v} is not between 0 and {n - 1}")
