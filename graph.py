from kruskal import Edge, kruskal


class Graph:
    '''
    Undirected weighted graph stored as an adjacency map of maps:
    node label -> neighbor label -> weight.

    Every `add_edge` writes both directions, so the map stays symmetric.
    '''

    def __init__(self) -> None:
        self.adjacency: dict[str, dict[str, int]] = {}

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, label: str) -> bool:
        return label in self.adjacency

    @property
    def nodes(self) -> list[str]:
        return list(self.adjacency)

    def neighbors(self, label: str) -> dict[str, int]:
        return self.adjacency[label]

    def add_edge(self, source: str, destination: str, weight: int) -> None:
        self.adjacency.setdefault(source, {})[destination] = weight
        self.adjacency.setdefault(destination, {})[source] = weight

    def edges(self) -> list[Edge]:
        # both directions of each edge, once per adjacency entry
        return [Edge(u, v, w)
                for (u, nbrs) in self.adjacency.items()
                for (v, w) in nbrs.items()]

    def is_connected(self) -> bool:
        visited = set()

        if self.adjacency:
            stack = [next(iter(self.adjacency))]
            while stack:
                node = stack.pop()
                if node in visited:
                    continue
                visited.add(node)
                stack.extend(n for n in self.adjacency[node] if n not in visited)

        return len(visited) == len(self.adjacency)

    def mst_edges(self) -> list[Edge]:
        return kruskal(self.edges())

    def construct_mst(self) -> int:
        return sum(e.weight for e in self.mst_edges())

    def format(self) -> str:
        lines = []
        for (source, nbrs) in self.adjacency.items():
            targets = ' '.join(f'{v}({w})' for (v, w) in nbrs.items())
            lines.append(f'{source} -> {targets}'.rstrip())
        return '\n'.join(lines)
