import random

import pytest

pytest.importorskip("gurobipy")

from cost_evaluator import Prices, evaluate
from graph_builder import build_bipartite_graph
from grid_model import build_grid
from mip_solver import solve_patch_mip


class TestSolvePatchMip:
    def test_scenario_a(self, scenario_a_rows):
        grid = build_grid(scenario_a_rows)
        price, pairs = solve_patch_mip(build_bipartite_graph(grid), Prices(3, 2))
        assert price == 27
        assert len(pairs) == 7

    def test_pairs_are_graph_edges(self, scenario_a_rows):
        grid = build_grid(scenario_a_rows)
        graph = build_bipartite_graph(grid)
        _, pairs = solve_patch_mip(graph, Prices(2, 3))
        lefts = [u for u, _ in pairs]
        rights = [v for _, v in pairs]
        assert len(set(lefts)) == len(lefts)
        assert len(set(rights)) == len(rights)
        for u, v in pairs:
            assert v in graph.adjacency[u]

    def test_no_repair_cells(self):
        grid = build_grid(["..."])
        assert solve_patch_mip(build_bipartite_graph(grid), Prices(3, 2)) == (0, [])

    def test_agrees_with_matching(self):
        rng = random.Random(7)
        for _ in range(15):
            rows = ["".join(rng.choice("**.") for _ in range(6)) for _ in range(5)]
            grid = build_grid(rows)
            prices = Prices(rng.randint(1, 5), rng.randint(1, 5))
            by_matching = evaluate(grid, prices, strategy="matching")
            by_mip = evaluate(grid, prices, strategy="mip")
            assert by_mip.price == by_matching.price
            assert by_mip.matching_size == by_matching.matching_size
