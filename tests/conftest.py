from functools import lru_cache

import pytest

import config as cfg

SCENARIO_A_ROWS = [
    ".**.**.***",
    ".*..*..*.*",
    "..**.*.***",
]


def brute_force_price(rows, double_price, simple_price, marker="*"):
    """Exhaustive exact cover of the repair cells, for small grids only."""
    height = len(rows)
    width = len(rows[0]) if height else 0
    cells = [(r, c) for r in range(height) for c in range(width) if rows[r][c] == marker]
    repair = set(cells)

    @lru_cache(maxsize=None)
    def best(covered):
        for cell in cells:
            if cell not in covered:
                break
        else:
            return 0
        r, c = cell
        options = [simple_price + best(covered | {cell})]
        for neighbor in ((r, c + 1), (r + 1, c)):
            if neighbor in repair and neighbor not in covered:
                options.append(double_price + best(covered | {cell, neighbor}))
        return min(options)

    return best(frozenset())


@pytest.fixture(autouse=True)
def reset_solver_config():
    saved = cfg.SOLVER.as_dict()
    yield
    for key, value in saved.items():
        setattr(cfg.SOLVER, key, value)


@pytest.fixture
def scenario_a_rows():
    return list(SCENARIO_A_ROWS)


@pytest.fixture
def brute_force():
    return brute_force_price
