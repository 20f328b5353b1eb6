import logging

import numpy as np

from implication_graph import FrozenGraph

logger = logging.getLogger(__name__)

UNVISITED = -1


class _Traversal:
    """Per-vertex bookkeeping for a single run over a graph of n vertices."""

    def __init__(self, n):
        self.vertex_id = np.full(n, UNVISITED, dtype=np.int64)
        self.low_link = np.zeros(n, dtype=np.int64)
        self.on_stack = np.zeros(n, dtype=bool)
        self.stack = []
        self.next_id = 0

    def enter(self, vertex):
        self.stack.append(vertex)
        self.on_stack[vertex] = True
        self.vertex_id[vertex] = self.next_id
        self.low_link[vertex] = self.next_id
        self.next_id += 1


class TarjanSccFinder:
    """Tarjan's strongly connected components algorithm over a frozen graph.

    The depth-first search runs on an explicit work stack of [vertex, edge position]
    frames, so long implication chains do not hit the interpreter recursion limit.
    Components come out in the order they close, which is reverse topological
    order of the condensation graph.
    """

    def __init__(self, graph):
        self.graph = FrozenGraph.from_graph(graph)
        self.scc_pop_order = None

    def find_sccs(self):
        """Return the components as lists of literals, computing them once."""
        if self.scc_pop_order is not None:
            return self.scc_pop_order

        n = len(self.graph)
        state = _Traversal(n)
        sccs = []

        for vertex in range(n):
            if state.vertex_id[vertex] == UNVISITED:
                self._dfs(state, vertex, sccs)

        logger.debug("Found %d strongly connected components over %d vertices", len(sccs), n)
        self.scc_pop_order = sccs
        return sccs

    def _dfs(self, state, root, sccs):
        adjacency = self.graph.adjacency
        state.enter(root)
        work = [[root, 0]]

        while work:
            frame = work[-1]
            vertex, pos = frame
            edges = adjacency[vertex]

            if pos < len(edges):
                to = edges[pos]
                if state.vertex_id[to] == UNVISITED:
                    # descend; this edge is looked at again once `to` is finished
                    state.enter(to)
                    work.append([to, 0])
                    continue
                # a visited vertex off the stack already belongs to a closed component
                if state.on_stack[to]:
                    state.low_link[vertex] = min(state.low_link[vertex], state.low_link[to])
                frame[1] = pos + 1
                continue

            work.pop()
            if state.vertex_id[vertex] == state.low_link[vertex]:
                sccs.append(self._close_component(state, vertex))

    def _close_component(self, state, root):
        """Pop the vertex stack down to and including root."""
        component = []
        while True:
            top = state.stack.pop()
            state.on_stack[top] = False
            component.append(self.graph.literal(top))
            if top == root:
                break
        return component


def find_sccs(graph):
    """Strongly connected components of an implication graph or a literal -> set mapping."""
    return TarjanSccFinder(graph).find_sccs()
