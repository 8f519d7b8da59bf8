from dsakit.dijkstra import Vertex, dijkstra


def _graph():
    s, t, x, y, z = (Vertex(n) for n in "stxyz")
    adj_list = {
        s: [(t, 10), (y, 5)],
        t: [(y, 2), (x, 1)],
        x: [(z, 4)],
        y: [(t, 3), (x, 9), (z, 2)],
        z: [(s, 7), (x, 6)],
    }
    return (s, t, x, y, z), adj_list


def test_dijkstra():
    (s, t, x, y, z), adj_list = _graph()
    distances = dijkstra(s, adj_list)
    assert distances[t] == 8
    assert distances[s] == 0
    assert distances[y] == 5
    assert distances[x] == 9
    assert distances[z] == 7
    assert len(distances) == 5


def test_unreachable_vertices_are_absent():
    a, b, c = Vertex("a"), Vertex("b"), Vertex("c")
    distances = dijkstra(a, {a: [(b, 2)], c: [(a, 1)]})
    assert distances == {a: 0, b: 2}


def test_start_without_edges():
    a = Vertex("a")
    assert dijkstra(a, {}) == {a: 0}


def test_plain_keys():
    distances = dijkstra(1, {1: [(2, 4), (3, 1)], 3: [(2, 1)]})
    assert distances == {1: 0, 2: 2, 3: 1}