import random

from typing import Optional

import numpy as np


def generate(nvertices: int,
             density: float = 0.5,
             min_weight: int = 1,
             max_weight: int = 100,
             connected: bool = False,
             seed: Optional[int] = None) -> np.ndarray:
    '''
    Build the upper triangle of a random weighted adjacency matrix.

    A zero entry means "no edge", so weights are drawn from
    [max(min_weight, 1), max_weight]. With `connected`, the chain
    0-1-2-...-(n-1) is laid down first and counts towards the density.
    '''
    rng = random.Random(seed)
    min_weight = max(min_weight, 1)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)
    max_edges = nvertices * (nvertices-1) // 2
    total_edges = min(int(density * max_edges), max_edges)

    placed = 0
    if connected:
        for i in range(nvertices-1):
            adj_matrix[i, i+1] = rng.randint(min_weight, max_weight)
        placed = nvertices - 1

    for _ in range(max(total_edges - placed, 0)):
        # keep trying until an unoccupied spot is found
        new_spot = False
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    return adj_matrix


def write_network(adj_matrix: np.ndarray, fname: str, prefix: str = 'N', delimiter: str = ',') -> int:
    nedges = 0
    with open(fname, 'w') as f:
        n = adj_matrix.shape[0]
        for i in range(n):
            for j in range(i+1, n):
                if adj_matrix[i, j] != 0:
                    f.write(f'{prefix}{i}{delimiter}{prefix}{j}{delimiter}{adj_matrix[i, j]}\n')
                    nedges += 1
    return nedges


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate random shipping networks')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='network.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('--prefix', default='N')
    parser.add_argument('--delimiter', default=',')
    parser.add_argument('-c', '--connected', action='store_true')
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if args.nvertices < 2:
        parser.error('nvertices must be at least 2')

    adj_matrix = generate(args.nvertices,
                          density=args.density,
                          min_weight=args.min_weight,
                          max_weight=args.max_weight,
                          connected=args.connected,
                          seed=args.seed)

    if args.verbose:
        print('Graph adjacency matrix:')
        print(adj_matrix)
        print()

    nedges = write_network(adj_matrix, args.outfile, args.prefix, args.delimiter)

    if not args.quiet:
        print(f'Generated a network on {args.nvertices} vertices ({nedges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')
        print(f'  Written to {args.outfile}')

'''
File format:

<source><delimiter><destination><delimiter><weight>
<source><delimiter><destination><delimiter><weight>
...

'''
