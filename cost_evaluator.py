"""
Minimum repair price from the repair-cell count, the matching size and the
two patch prices.

Each matched pair is one double patch; every other repair cell takes a simple
patch. When two simple patches cost no more than one double patch the
matching is never computed.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import config as cfg
import wall_utils.logging as logging
from exceptions import ConfigError
from graph_builder import build_bipartite_graph
from grid_model import Grid
from matching_engine import MatchingEngine
from mip_solver import solve_patch_mip

logger = logging.getLogger(__name__)

SHORT_CIRCUIT = "short-circuit"


@dataclass(frozen=True)
class Prices:
    double_price: int
    simple_price: int

    def prefers_simple(self) -> bool:
        return 2 * self.simple_price <= self.double_price


@dataclass
class CostResult:
    price: int
    matching_size: int
    strategy: str
    pairs: List[Tuple[int, int]] = field(default_factory=list)


def combine(total_free_count: int, matching_size: int, prices: Prices) -> int:
    return matching_size * prices.double_price + (total_free_count - 2 * matching_size) * prices.simple_price


def evaluate(grid: Grid, prices: Prices, strategy: Optional[str] = None,
             search_mode: Optional[str] = None) -> CostResult:
    strategy = strategy or cfg.SOLVER.Strategy
    if strategy not in cfg.STRATEGIES:
        raise ConfigError(f"Unknown strategy: {strategy!r}")
    total = grid.total_free_count

    if prices.prefers_simple():
        logger.info(
            "2 * simple (%d) <= double (%d): %d simple patches, matching skipped",
            2 * prices.simple_price, prices.double_price, total,
        )
        return CostResult(price=prices.simple_price * total, matching_size=0, strategy=SHORT_CIRCUIT)

    if strategy == "matching":
        graph = build_bipartite_graph(grid)
        engine = MatchingEngine(graph, search_mode=search_mode)
        m = engine.run()
        result = CostResult(price=combine(total, m, prices), matching_size=m,
                            strategy=strategy, pairs=engine.pairs())
    else:
        graph = build_bipartite_graph(grid)
        price, pairs = solve_patch_mip(graph, prices)
        result = CostResult(price=price, matching_size=len(pairs), strategy=strategy, pairs=pairs)

    logger.info(
        "Min price %d: %d double + %d simple patches",
        result.price, result.matching_size, total - 2 * result.matching_size,
    )
    return result


def get_min_price(grid: Grid, prices: Prices, strategy: Optional[str] = None) -> int:
    return evaluate(grid, prices, strategy=strategy).price
