import argparse
import os
import sys
from datetime import datetime

import config as cfg
import data_loader
import reports
import wall_utils.logging as logging
from cost_evaluator import Prices, evaluate
from exceptions import WallRepairError
from grid_model import build_grid
from solution_processor import build_plan, render_plan
from wall_utils.context import scenario_context

logger = logging.getLogger(__name__)


def solve_problem(problem, strategy=None, search_mode=None):
    grid = build_grid(problem.rows)
    prices = Prices(problem.double_price, problem.simple_price)
    result = evaluate(grid, prices, strategy=strategy, search_mode=search_mode)
    return grid, result


def run_single(stdin, stdout, show_plan=False):
    problem = data_loader.read_input(stdin)
    grid, result = solve_problem(problem)
    stdout.write(f"{result.price}\n")
    if show_plan:
        plan = build_plan(grid, result.pairs)
        for line in render_plan(problem.rows, plan):
            stdout.write(line + "\n")
    return result.price


def run_batch(csv_path, report_dir=None):
    df = data_loader.load_scenarios(csv_path)
    if df.empty:
        logger.warning("No scenarios in %s", csv_path)
        return []

    rows = []
    for scen in df.itertuples(index=False):
        scenario_id = scen.SCENARIO_ID
        description = scen.DESCRIPTION
        with scenario_context(scenario_id):
            try:
                scenario_cfg = cfg.SolverConfig(**cfg.SOLVER.as_dict())
                cfg.update_from_row(scen._asdict(), scenario_cfg)
                problem = data_loader.load_input_file(scen.INPUT_PATH)
                grid, result = solve_problem(
                    problem, strategy=scenario_cfg.Strategy, search_mode=scenario_cfg.SearchMode,
                )
                rows.append(reports.gather_scenario_row(scenario_id, description, problem, grid, result))
                logger.info("Scenario %s solved: min price %d", scenario_id, result.price)
            except WallRepairError as e:
                logger.error("Scenario %s failed: %s", scenario_id, e)
                rows.append(reports.gather_failed_row(scenario_id, description, e))

    output_folder = report_dir or f"reports_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    os.makedirs(output_folder, exist_ok=True)
    reports.write_scenario_csv(os.path.join(output_folder, "scenario_prices.csv"), rows)
    return rows


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="wall-repair",
        description="Minimum price to patch every damaged cell of a wall with 1x1 and 1x2 patches.",
    )
    parser.add_argument("--strategy", choices=cfg.STRATEGIES, help="matching engine or MIP cross-check")
    parser.add_argument("--search-mode", choices=cfg.SEARCH_MODES, help="augmenting path search flavour")
    parser.add_argument("--show-plan", action="store_true", help="print the patch layout after the price")
    parser.add_argument("--batch", metavar="CSV", help="solve every scenario listed in a CSV table")
    parser.add_argument("--report-dir", help="directory for the batch report (default: reports_<timestamp>)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-dir", default=None, help="also write rotating log files here")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    overrides = {}
    if args.strategy:
        overrides["Strategy"] = args.strategy
    if args.search_mode:
        overrides["SearchMode"] = args.search_mode
    if args.log_level:
        overrides["LogLevel"] = args.log_level
    if args.log_dir:
        overrides["LogDir"] = args.log_dir

    try:
        cfg.SOLVER.update(**overrides)
        logging.setup(log_dir=cfg.SOLVER.LogDir, level=cfg.SOLVER.LogLevel)
        if args.batch:
            run_batch(args.batch, args.report_dir)
        else:
            run_single(sys.stdin, sys.stdout, show_plan=args.show_plan)
    except WallRepairError as e:
        logger.error("wall-repair failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Pipeline failed")
        raise
    return 0


if __name__ == '__main__':
    sys.exit(main())
