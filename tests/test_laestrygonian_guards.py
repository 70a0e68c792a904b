import pytest

from dsapuzzles.codyssi.laestrygonian_guards import (
    lowest_path_cost,
    parse_graph,
    solve,
)

GRAPH = (
    "STT -> A | 5\n"
    "STT -> B | 2\n"
    "B -> C | 4\n"
    "C -> D | 1\n"
    "A -> D | 9\n"
    "D -> STT | 3\n"
)


def test_parse_graph():
    assert parse_graph("A -> B | 3\nA -> C | 4\nC -> A | 1") == {
        "A": {"B": 3, "C": 4},
        "C": {"A": 1},
    }


def test_parse_graph_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_graph("A to B | 3")


def test_cheaper_route_wins():
    graph = parse_graph(GRAPH)
    expected = graph["STT"]["B"] + graph["B"]["C"] + graph["C"]["D"]
    assert lowest_path_cost("STT", "D", graph) == expected


def test_fixed_cost_counts_hops():
    edges = [("A", "B"), ("B", "C"), ("C", "D")]
    graph = parse_graph("\n".join(f"{a} -> {b} | 50" for a, b in edges))
    assert lowest_path_cost("A", "D", graph, 1) == len(edges)


def test_start_is_free():
    assert lowest_path_cost("STT", "STT", parse_graph(GRAPH)) == 0


def test_unreachable():
    graph = parse_graph("A -> B | 1\nC -> D | 1")
    assert lowest_path_cost("A", "D", graph) is None


def test_solve():
    assert solve(GRAPH) == (4, 210, 17)


def test_triangle_cycle():
    assert solve("STT -> A | 5\nA -> B | 2\nB -> STT | 1\n")[2] == 5 + 2 + 1