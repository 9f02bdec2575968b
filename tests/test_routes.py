import logging

import pytest

import routes


@pytest.fixture
def network(tmp_path):
    path = tmp_path / 'network.txt'
    path.write_text('A, B, 4\nB, C, 2\n\nA, C, 5\nC, D, 1\n')
    return str(path)


def test_load_graph(network):
    graph = routes.load_graph(network)
    assert sorted(graph.nodes) == ['A', 'B', 'C', 'D']
    assert graph.construct_mst() == 7


def test_malformed_records_are_skipped(tmp_path, caplog):
    path = tmp_path / 'network.txt'
    path.write_text('A,B,1\nA,B\nB,C,x\nC,D,2\n')

    with caplog.at_level(logging.WARNING, logger='routes'):
        edges = list(routes.read_edges(str(path)))

    assert [(e.u, e.v, e.weight) for e in edges] == [('A', 'B', 1), ('C', 'D', 2)]
    assert len(caplog.records) == 2
    assert ':2:' in caplog.records[0].getMessage()


def test_strict_mode_raises(tmp_path):
    path = tmp_path / 'network.txt'
    path.write_text('A,B,1\nB,C,-3\n')
    with pytest.raises(ValueError, match=':2:'):
        routes.load_graph(str(path), strict=True)


def test_main_output(network, capsys):
    assert routes.main([network]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == 'A -> B(4) C(5)'
    assert 'Is the graph connected? True' in out
    assert out[-1] == 'Total length of the MST: 7'


def test_main_verbose_and_quiet(network, capsys):
    assert routes.main([network, '-q', '-v']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Is the graph connected? True',
        'Total length of the MST: 7',
        '[(C, D, 1), (B, C, 2), (A, B, 4)]',
    ]


def test_main_delimiter(tmp_path, capsys):
    path = tmp_path / 'network.txt'
    path.write_text('A;B;1\nC;D;2\n')
    assert routes.main([str(path), '-d', ';', '-q']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ['Is the graph connected? False', 'Total length of the MST: 3']


def test_main_missing_file(tmp_path, capsys):
    assert routes.main([str(tmp_path / 'missing.txt')]) == 1
    assert 'Error' in capsys.readouterr().err
