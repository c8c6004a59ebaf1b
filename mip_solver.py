import gurobipy as gp
from gurobipy import GRB

import config as cfg
import wall_utils.logging as logging
from wall_utils.decorators import log_and_time
from exceptions import MipSolveError

logger = logging.getLogger(__name__)


@log_and_time("solve_patch_mip", error_cls=MipSolveError)
def solve_patch_mip(graph, prices, time_limit=None):
    """
    Exact-cover model of the patch problem, used to cross-check the matching.

    d[u,v] = 1 places a double patch on the edge (left u, right v);
    sL[u] / sR[v] = 1 places a simple patch on that repair cell.
    Every repair cell is covered exactly once; minimize total price.

    Returns (price, pairs) with pairs as sorted (left, right) tuples.
    """
    limit = time_limit if time_limit is not None else cfg.SOLVER.MipTimeLimit
    logger.info(
        "CHECKPOINT: building patch model left=%d right=%d edges=%d",
        graph.left_size, graph.right_size, graph.edge_count,
    )

    model = gp.Model("wall_repair_patches")
    try:
        model.setParam("OutputFlag", 0)
        model.setParam("TimeLimit", limit)

        d = {}
        for u, neighbors in enumerate(graph.adjacency):
            for v in neighbors:
                d[(u, v)] = model.addVar(vtype=GRB.BINARY, name=f"d_{u}_{v}")
        sL = {u: model.addVar(vtype=GRB.BINARY, name=f"sL_{u}") for u in range(graph.left_size)}
        sR = {v: model.addVar(vtype=GRB.BINARY, name=f"sR_{v}") for v in range(graph.right_size)}

        model.setObjective(
            prices.double_price * gp.quicksum(d.values())
            + prices.simple_price * (gp.quicksum(sL.values()) + gp.quicksum(sR.values())),
            GRB.MINIMIZE,
        )

        for u in range(graph.left_size):
            lhs = sL[u] + gp.quicksum(d[(u, v)] for v in graph.adjacency[u])
            model.addConstr(lhs == 1, name=f"CoverLeft_{u}")

        edges_by_right = {v: [] for v in range(graph.right_size)}
        for (u, v) in d:
            edges_by_right[v].append(u)
        for v in range(graph.right_size):
            lhs = sR[v] + gp.quicksum(d[(u, v)] for u in edges_by_right[v])
            model.addConstr(lhs == 1, name=f"CoverRight_{v}")

        logger.info("CHECKPOINT: solving patch model ...")
        model.optimize()

        if model.Status != GRB.OPTIMAL:
            raise MipSolveError(f"patch model ended with status={model.Status}")

        price = int(round(model.ObjVal))
        pairs = sorted(key for key, var in d.items() if var.X > 0.5)
        logger.info("  patch model => OPTIMAL, ObjVal=%s, double patches=%d", price, len(pairs))
        return price, pairs
    finally:
        model.dispose()
