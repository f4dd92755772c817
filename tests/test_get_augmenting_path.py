import unittest

from get_augmenting_path import INF, cheapest_path, trace_path
from load_data import parse_graph


class CheapestPathTest(unittest.TestCase):
    def test_direct_source_sink_arc(self):
        graph = parse_graph("2\n0 1 5 3\n")
        pred, dist, found = cheapest_path(graph, 0, 1)
        self.assertTrue(found)
        self.assertEqual(pred, [0, 0])
        self.assertEqual(dist, [0, 3])
        self.assertEqual(trace_path(pred, 0, 1), [0, 1])

    def test_picks_cheaper_route(self):
        graph = parse_graph("4\n0 1 2 1\n1 3 2 1\n0 2 3 5\n2 3 3 5\n")
        pred, dist, found = cheapest_path(graph, 0, 3)
        self.assertTrue(found)
        self.assertEqual(dist[3], 2)
        self.assertEqual(trace_path(pred, 0, 3), [0, 1, 3])

    def test_disconnected_sink(self):
        graph = parse_graph("3\n0 1 4 1\n")
        pred, dist, found = cheapest_path(graph, 0, 2)
        self.assertFalse(found)
        self.assertEqual(dist[2], INF)
        self.assertEqual(pred[2], 0)

    def test_no_residual_out_of_source(self):
        graph = parse_graph("3\n0 1 1 1\n1 2 1 1\n")
        graph.saturate(0, 1, 1)
        _, _, found = cheapest_path(graph, 0, 2)
        self.assertFalse(found)

    def test_zero_capacity_edge_unused(self):
        graph = parse_graph("3\n0 2 0 1\n0 1 1 9\n1 2 1 9\n")
        pred, dist, found = cheapest_path(graph, 0, 2)
        self.assertTrue(found)
        self.assertEqual(trace_path(pred, 0, 2), [0, 1, 2])
        self.assertEqual(dist[2], 18)

    def test_single_vertex_graph(self):
        graph = parse_graph("1\n")
        _, _, found = cheapest_path(graph, 0, 0)
        self.assertFalse(found)

    def test_tie_keeps_first_relaxation(self):
        graph = parse_graph("4\n0 1 1 1\n0 2 1 1\n1 3 1 1\n2 3 1 1\n")
        pred, dist, _ = cheapest_path(graph, 0, 3)
        self.assertEqual(dist[3], 2)
        self.assertEqual(pred[3], 1)

    def test_follows_negative_reverse_arc(self):
        graph = parse_graph("4\n0 1 1 1\n0 2 1 100\n1 2 1 1\n1 3 1 100\n2 3 1 1\n")
        for u, v in [(0, 1), (1, 2), (2, 3)]:
            graph.saturate(u, v, 1)
        pred, dist, found = cheapest_path(graph, 0, 3)
        self.assertTrue(found)
        self.assertEqual(trace_path(pred, 0, 3), [0, 2, 1, 3])
        self.assertEqual(dist[3], 100 - 1 + 100)

    def test_trace_path_rejects_cycle(self):
        with self.assertRaises(ValueError):
            trace_path([0, 1, 1], 0, 2)

    def test_deterministic(self):
        text = "5\n0 1 2 3\n0 2 2 3\n1 3 1 1\n2 3 1 1\n1 4 1 4\n3 4 2 2\n2 4 1 4\n"
        first = cheapest_path(parse_graph(text), 0, 4)
        second = cheapest_path(parse_graph(text), 0, 4)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
