"""
Builds the left->right bipartite graph of repair cells.

Left vertices are color-0 repair cells, right vertices color-1 repair cells,
both identified by partition index. Grid adjacency always flips the
checkerboard color, so every edge runs from left to right.
"""
from dataclasses import dataclass, field
from typing import List

import wall_utils.logging as logging
from wall_utils.decorators import log_and_time
from exceptions import GraphBuildError
from grid_model import Grid

logger = logging.getLogger(__name__)

# down, up, right, left
NEIGHBOR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class BipartiteGraph:
    left_size: int
    right_size: int
    adjacency: List[List[int]] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency)


@log_and_time("build_bipartite_graph", error_cls=GraphBuildError)
def build_bipartite_graph(grid: Grid) -> BipartiteGraph:
    graph = BipartiteGraph(left_size=grid.count_color0, right_size=grid.count_color1)

    # positions_by_color[0] is row-major, so adjacency[i] belongs to left vertex i
    for (r, c) in grid.positions_by_color[0]:
        neighbors = []
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc):
                continue
            neighbor = grid.cell(nr, nc)
            if neighbor.requires_repair:
                neighbors.append(neighbor.partition_index)
        graph.adjacency.append(neighbors)

    logger.debug(
        "Bigraph built: left=%d right=%d edges=%d",
        graph.left_size, graph.right_size, graph.edge_count,
    )
    return graph
