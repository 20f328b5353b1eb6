import logging

import numpy as np

from implication_graph import ImplicationGraph
from tarjan import TarjanSccFinder

logger = logging.getLogger(__name__)


class TwoSATProblem:
    """A 2-CNF formula solved through the SCCs of its implication graph.

    Clauses are inserted first; `solve()` freezes the graph and caches the
    components. Inserting another clause drops the frozen snapshot, so the
    next solve starts over on the new graph.
    """

    def __init__(self):
        self.graph = ImplicationGraph()
        self._finder = None  # holds the frozen snapshot and its components

    @property
    def digraph(self):
        return self.graph.digraph

    @property
    def clauses(self):
        return self.graph.clauses

    @property
    def num_vars(self):
        return self.graph.num_vars

    @property
    def num_literals(self):
        return self.graph.num_literals

    @property
    def num_implications(self):
        return self.graph.num_implications

    def insert_clause(self, a, b):
        """Insert (a OR b); raises InvalidLiteral without touching the graph if a or b is 0."""
        self.graph.insert_clause(a, b)
        self._finder = None

    def solve(self):
        """Return the strongly connected components in reverse topological order."""
        if self._finder is None:
            self._finder = TarjanSccFinder(self.graph.freeze())
            logger.debug("Solving %d clauses over %d variables", len(self.graph.clauses), self.graph.num_vars)
        return self._finder.find_sccs()

    def get_scc_solution(self):
        """Components of the last solve, or None if the graph changed since."""
        if self._finder is None:
            return None
        return self._finder.find_sccs()

    def is_satisfiable(self):
        """A formula is unsatisfiable iff some x and -x share a component."""
        for scc in self.solve():
            members = set(scc)
            if any(-lit in members for lit in scc):
                return False
        return True

    def find_solution(self):
        """Return {variable: bool} for variables 1..num_vars, or None if unsatisfiable."""
        if not self.is_satisfiable():
            return None

        # 0 = unassigned, 1 = true, -1 = false; index 0 is unused
        values = np.zeros(self.num_vars + 1, dtype=np.int8)

        # NOTE: components must be taken in emission order. A component closes
        # before everything that implies it, so the first writer is always the
        # one that is safe to make true.
        for scc in self.solve():
            if values[abs(scc[0])] != 0:
                continue
            for lit in scc:
                values[abs(lit)] = 1 if lit > 0 else -1

        # variables below num_vars that never occur in a clause are free
        return {var: bool(values[var] > 0) for var in range(1, self.num_vars + 1)}

    def __repr__(self):
        return f"TwoSATProblem(clauses={len(self.graph.clauses)}, num_vars={self.graph.num_vars})"
