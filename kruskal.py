import logging

from typing import Iterable

logger = logging.getLogger(__name__)


class UnionFind:
    '''
    Disjoint sets over string labels, stored as a parent map.

    Labels are registered lazily on their first `find`. There is no
    union-by-rank, so adversarial union orders can build long chains;
    path compression in `find` flattens them again on lookup.
    '''

    def __init__(self) -> None:
        self.parent: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, label: str) -> bool:
        return label in self.parent

    def find(self, label: str) -> str:
        if label not in self.parent:
            self.parent[label] = label
            return label

        path = []
        while self.parent[label] != label:
            path.append(label)
            label = self.parent[label]

        # point everything we walked through straight at the root
        for node in path:
            self.parent[node] = label

        return label

    def union(self, a: str, b: str) -> bool:
        # the root of a always goes under the root of b
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        self.parent[root_a] = root_b
        return True

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)


class Edge:
    def __init__(self, u: str, v: str, weight: int) -> None:
        self.u = u
        self.v = v
        self.weight = weight

    @classmethod
    def from_line(cls, s: str, delimiter: str = ',') -> 'Edge':
        parts = [token.strip() for token in s.split(delimiter)]
        if len(parts) != 3:
            raise ValueError(f'expected 3 fields, got {len(parts)}: {s.strip()!r}')

        u, v, raw_weight = parts
        if not u or not v:
            raise ValueError(f'empty node label: {s.strip()!r}')

        try:
            weight = int(raw_weight)
        except ValueError:
            raise ValueError(f'weight is not an integer: {raw_weight!r}') from None

        if weight < 0:
            raise ValueError(f'negative weight: {weight}')

        return Edge(u, v, weight)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.u, self.v, self.weight) == (other.u, other.v, other.weight)

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


def kruskal(edges: Iterable[Edge]) -> list[Edge]:
    '''
    Run Kruskal's algorithm over `edges` and return the selected edges.

    The input does not need to be deduplicated: a repeated edge is rejected
    once its endpoints have been joined. On a disconnected input the result
    is a minimum spanning forest.
    '''
    # sort is stable, so equal weights keep their enumeration order
    edges = sorted(edges, key=lambda e: e.weight)
    uf = UnionFind()
    mst = []

    for edge in edges:
        if uf.find(edge.u) != uf.find(edge.v):
            mst.append(edge)
            uf.union(edge.u, edge.v)

    logger.debug('kruskal selected %d of %d edges', len(mst), len(edges))
    return mst
