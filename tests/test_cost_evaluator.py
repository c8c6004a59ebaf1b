import random
from unittest.mock import patch

import pytest

import config as cfg
import cost_evaluator
from cost_evaluator import SHORT_CIRCUIT, Prices, combine, evaluate, get_min_price
from exceptions import ConfigError
from grid_model import build_grid


class TestPrices:
    @pytest.mark.parametrize("double,simple,expected", [
        (5, 2, True),
        (4, 2, True),
        (3, 2, False),
        (0, 0, True),
    ])
    def test_prefers_simple(self, double, simple, expected):
        assert Prices(double, simple).prefers_simple() is expected

    def test_combine(self):
        assert combine(17, 7, Prices(3, 2)) == 27
        assert combine(17, 0, Prices(3, 2)) == 34


class TestScenarios:
    def test_scenario_a(self, scenario_a_rows):
        # 17 repair cells, 7 double patches, 3 simple patches
        grid = build_grid(scenario_a_rows)
        assert get_min_price(grid, Prices(double_price=2, simple_price=3)) == 23
        assert get_min_price(grid, Prices(double_price=3, simple_price=2)) == 27

    @pytest.mark.parametrize("double", [0, 1, 9, 10, 100])
    def test_scenario_b_single_cell(self, double):
        assert get_min_price(build_grid(["*"]), Prices(double, 5)) == 5

    def test_scenario_c_double_patch_wins(self):
        result = evaluate(build_grid(["**"]), Prices(3, 2))
        assert result.price == 3
        assert result.matching_size == 1
        assert result.strategy == "matching"

    def test_scenario_d_short_circuit(self):
        result = evaluate(build_grid(["**"]), Prices(5, 2))
        assert result.price == 4
        assert result.strategy == SHORT_CIRCUIT
        assert result.pairs == []

    @pytest.mark.parametrize("prices", [Prices(3, 2), Prices(5, 2), Prices(0, 0)])
    def test_scenario_e_nothing_to_repair(self, prices):
        assert get_min_price(build_grid(["...", "..."]), prices) == 0

    def test_empty_field(self):
        assert get_min_price(build_grid([]), Prices(3, 2)) == 0


class TestShortCircuit:
    def test_matching_not_invoked(self, scenario_a_rows):
        grid = build_grid(scenario_a_rows)
        with patch.object(cost_evaluator, "build_bipartite_graph") as build, \
                patch.object(cost_evaluator, "MatchingEngine") as engine:
            assert get_min_price(grid, Prices(4, 2)) == 2 * 17
            build.assert_not_called()
            engine.assert_not_called()

    def test_matching_invoked_otherwise(self, scenario_a_rows):
        grid = build_grid(scenario_a_rows)
        with patch.object(cost_evaluator, "MatchingEngine", wraps=cost_evaluator.MatchingEngine) as engine:
            get_min_price(grid, Prices(3, 2))
            engine.assert_called_once()


class TestEvaluate:
    def test_unknown_strategy(self):
        with pytest.raises(ConfigError):
            evaluate(build_grid(["**"]), Prices(3, 2), strategy="greedy")

    def test_unknown_strategy_rejected_on_short_circuit_path(self):
        with pytest.raises(ConfigError):
            evaluate(build_grid(["**"]), Prices(5, 2), strategy="bogus")

    def test_strategy_from_config(self):
        cfg.SOLVER.update(Strategy="mip")
        with patch.object(cost_evaluator, "solve_patch_mip", return_value=(3, [(0, 0)])) as mip:
            result = evaluate(build_grid(["**"]), Prices(3, 2))
        mip.assert_called_once()
        assert result.strategy == "mip"
        assert result.price == 3

    def test_matches_exhaustive_search(self, brute_force):
        rng = random.Random(42)
        for _ in range(80):
            height, width = rng.randint(1, 4), rng.randint(1, 4)
            rows = ["".join(rng.choice("*.") for _ in range(width)) for _ in range(height)]
            prices = Prices(rng.randint(0, 10), rng.randint(0, 10))
            grid = build_grid(rows)
            assert get_min_price(grid, prices) == brute_force(rows, prices.double_price, prices.simple_price)

    def test_idempotent(self, scenario_a_rows):
        grid = build_grid(scenario_a_rows)
        prices = Prices(3, 2)
        assert len({get_min_price(grid, prices) for _ in range(3)}) == 1

    def test_price_non_increasing_in_matching_size(self):
        prices = Prices(3, 2)
        values = [combine(17, m, prices) for m in range(9)]
        assert values == sorted(values, reverse=True)
