import logging

import numpy as np

from exceptions import InvalidLiteral

logger = logging.getLogger(__name__)


class ImplicationGraph:
    """Mutable implication graph of a 2-CNF sentence.

    Vertices are literals (signed integers). Every literal touched by a clause,
    together with its negation, is a key of `digraph`, even when nothing leaves it.
    """

    def __init__(self):
        self.digraph = {}  # literal -> set of implied literals
        self.clauses = []
        self.num_literals = 0
        self.num_implications = 0
        self.num_vars = 0

    def insert_clause(self, a, b):
        """Insert (a OR b) as the implications -a -> b and -b -> a."""
        for lit in (a, b):
            if isinstance(lit, bool) or not isinstance(lit, (int, np.integer)) or lit == 0:
                raise InvalidLiteral(clause=(a, b))
        a, b = int(a), int(b)

        for lit in (a, -a, b, -b):
            if lit not in self.digraph:
                self.digraph[lit] = set()
                self.num_literals += 1

        # (a OR b) is equivalent to either of (NOT a -> b) or (NOT b -> a)
        for src, dst in ((-a, b), (-b, a)):
            self.digraph[src].add(dst)
            self.num_implications += 1

        self.clauses.append((a, b))
        self.num_vars = max(self.num_vars, abs(a), abs(b))

    def freeze(self):
        """Take an immutable dense-id snapshot for the SCC engine."""
        return FrozenGraph(self.digraph)

    def __len__(self):
        return len(self.digraph)

    def __repr__(self):
        return f"ImplicationGraph(vertices={len(self.digraph)}, implications={self.num_implications})"


class FrozenGraph:
    """Read-only view of an implication graph with vertices renumbered 0..n-1.

    `literals[i]` is the literal of vertex i, `ids[lit]` its inverse and
    `adjacency[i]` the ids of the vertices implied by vertex i. Ids follow the
    key order of the source mapping.
    """

    def __init__(self, digraph):
        self.literals = np.fromiter(digraph.keys(), dtype=np.int64, count=len(digraph))
        self.ids = {int(lit): idx for idx, lit in enumerate(self.literals)}
        # NOTE: a KeyError here means an edge points at a literal that is not a vertex
        self.adjacency = [[self.ids[to] for to in digraph[int(lit)]] for lit in self.literals]
        self.num_edges = sum(len(adj) for adj in self.adjacency)
        logger.debug("Froze implication graph: %d vertices, %d edges", len(self.literals), self.num_edges)

    @classmethod
    def from_graph(cls, graph):
        if isinstance(graph, FrozenGraph):
            return graph
        if isinstance(graph, ImplicationGraph):
            return graph.freeze()
        return cls(graph)

    def __len__(self):
        return len(self.literals)

    def literal(self, vertex):
        return int(self.literals[vertex])
