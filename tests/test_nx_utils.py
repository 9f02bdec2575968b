import networkx as nx

import nx_utils
import routes
from graph import Graph


def test_round_trip_through_networkx():
    graph = Graph()
    graph.add_edge('A', 'B', 4)
    graph.add_edge('B', 'C', 2)
    g = nx_utils.to_nx(graph)
    assert g.number_of_edges() == 2
    assert g['A']['B']['weight'] == 4

    back = nx_utils.from_nx(g)
    assert back.neighbors('B') == {'A': 4, 'C': 2}


def test_from_nx_uses_decide_weight_for_unweighted_graphs():
    graph = nx_utils.from_nx(nx.path_graph(4), nx_utils.arbitrary_weight(3, 3))
    assert graph.construct_mst() == 9
    assert graph.is_connected()


def test_reference_weight_on_forest():
    graph = Graph()
    graph.add_edge('A', 'B', 1)
    graph.add_edge('C', 'D', 6)
    assert nx_utils.reference_mst_weight(graph) == 7
    assert graph.construct_mst() == 7


def test_to_output_file(tmp_path):
    path = str(tmp_path / 'circulant.txt')
    g = nx.circulant_graph(50, [1, 2])
    nx_utils.to_output_file(g, nx_utils.arbitrary_weight(1, 500, seed=7), path)

    graph = routes.load_graph(path)
    assert len(graph) == 50
    assert graph.is_connected()
    assert graph.construct_mst() == nx_utils.reference_mst_weight(graph)
