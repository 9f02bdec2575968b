import networkx as nx
import random

from typing import Any, Callable

from graph import Graph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_nx(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.nodes)
    for edge in graph.edges():
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g

def from_nx(g: nx.Graph,
            decide_weight: Callable[[Any, Any], int]= lambda u, v: 1) -> Graph:
    graph = Graph()
    for (u, v, data) in g.edges(data=True):
        weight = data['weight'] if 'weight' in data else decide_weight(u, v)
        graph.add_edge(str(u), str(v), weight)
    return graph

def reference_mst_weight(graph: Graph) -> int:
    # minimum_spanning_tree yields a spanning forest on disconnected input
    mst = nx.minimum_spanning_tree(to_nx(graph), weight='weight')
    return int(mst.size(weight='weight'))

def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   delimiter: str=',',
                   nodename_to_label: Callable[[Any], str]= lambda x: str(x)) -> None:
    with open(fname, 'w') as f:
        for edge in g.edges:
            # Convert node names to labels
            u = nodename_to_label(edge[0])
            v = nodename_to_label(edge[1])
            f.write(f'{u}{delimiter}{v}{delimiter}{decide_weight(edge[0], edge[1])}\n')


if __name__ == '__main__':
    import argparse

    generators = {
        'circulant': lambda n, seed: nx.circulant_graph(n, [1, 2]),
        'gnp': lambda n, seed: nx.fast_gnp_random_graph(n, 4 / max(n, 1), seed=seed),
        'caveman': lambda n, seed: nx.connected_caveman_graph(max(n // 10, 2), 10),
    }

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write networkx generated graphs as edge-list files')
    parser.add_argument('kind', choices=sorted(generators))
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='network.txt')
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=500, type=int)

    args = parser.parse_args()

    g = generators[args.kind](args.nvertices, args.seed)
    to_output_file(g, arbitrary_weight(args.min_weight, args.max_weight, args.seed), args.outfile)
    print(f'Wrote {g.number_of_nodes()} nodes, {g.number_of_edges()} edges to {args.outfile}')
