"""Turns matched vertex pairs into a patch plan and a printable layout."""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from cost_evaluator import Prices
from grid_model import Grid, Position

SIMPLE_MARK = "?"
HORIZONTAL_MARKS = ("<", ">")
VERTICAL_MARKS = ("^", "v")


@dataclass
class RepairPlan:
    doubles: List[Tuple[Position, Position]] = field(default_factory=list)
    singles: List[Position] = field(default_factory=list)

    def total_price(self, prices: Prices) -> int:
        return len(self.doubles) * prices.double_price + len(self.singles) * prices.simple_price


def build_plan(grid: Grid, pairs: Sequence[Tuple[int, int]] = ()) -> RepairPlan:
    """
    Each (left, right) pair becomes a double patch, with the upper/left-most
    cell first; every repair cell outside the pairs gets a simple patch.
    """
    plan = RepairPlan()
    covered = set()
    for left, right in pairs:
        a = grid.position_of(0, left)
        b = grid.position_of(1, right)
        plan.doubles.append((min(a, b), max(a, b)))
        covered.add(a)
        covered.add(b)

    for r in range(grid.height):
        for c in range(grid.width):
            if grid.cell(r, c).requires_repair and (r, c) not in covered:
                plan.singles.append((r, c))
    return plan


def render_plan(rows: Sequence[str], plan: RepairPlan) -> List[str]:
    canvas = [list(row) for row in rows]
    for (r1, c1), (r2, c2) in plan.doubles:
        first, second = HORIZONTAL_MARKS if r1 == r2 else VERTICAL_MARKS
        canvas[r1][c1] = first
        canvas[r2][c2] = second
    for r, c in plan.singles:
        canvas[r][c] = SIMPLE_MARK
    return ["".join(line) for line in canvas]
