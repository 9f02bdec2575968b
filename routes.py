import logging
import sys

from typing import Iterator, Optional

from graph import Graph
from kruskal import Edge

logger = logging.getLogger(__name__)


def read_edges(fname: str, delimiter: str = ',', strict: bool = False) -> Iterator[Edge]:
    with open(fname, 'r') as f:
        for (lineno, line) in enumerate(f, start=1):
            if not line.strip():
                continue

            try:
                yield Edge.from_line(line, delimiter)
            except ValueError as e:
                if strict:
                    raise ValueError(f'{fname}:{lineno}: {e}') from e
                logger.warning('Skipping %s:%d: %s', fname, lineno, e)


def load_graph(fname: str, delimiter: str = ',', strict: bool = False) -> Graph:
    graph = Graph()
    for edge in read_edges(fname, delimiter, strict):
        graph.add_edge(edge.u, edge.v, edge.weight)

    logger.info('Loaded %d nodes from %s', len(graph), fname)
    return graph


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='routes',
                                     description='Check connectivity and MST length of a shipping network')
    parser.add_argument('infile', nargs='?', default='network.txt')
    parser.add_argument('-d', '--delimiter', default=',')
    parser.add_argument('--strict',
                        action='store_true',
                        help='fail on the first malformed record instead of skipping it')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='also print the edges chosen for the MST')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='do not print the adjacency list')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s [%(levelname)s] %(message)s')

    try:
        graph = load_graph(args.infile, args.delimiter, args.strict)
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if not args.quiet:
        print(graph.format())

    print('Is the graph connected?', graph.is_connected())

    mst = graph.mst_edges()
    print('Total length of the MST:', sum(e.weight for e in mst))
    if args.verbose:
        print(mst)

    return 0


if __name__ == '__main__':
    sys.exit(main())
