"""Batch report rows and the scenario price CSV."""

import csv
from datetime import datetime

import wall_utils.logging as logging
from exceptions import ReportWriteError
from wall_utils.decorators import log_and_time

logger = logging.getLogger(__name__)

SCENARIO_REPORT_HEADER = [
    "SCENARIO_ID", "TIME_STAMP", "SCENARIO_DESCRIPTION",
    "HEIGHT", "WIDTH", "REPAIR_CELLS",
    "PRICE_DOUBLE", "PRICE_SIMPLE",
    "DOUBLE_PATCHES", "SIMPLE_PATCHES",
    "MIN_PRICE", "STRATEGY", "ERROR",
]


def gather_scenario_row(scenario_id, description, problem, grid, result):
    timestamp = datetime.now().strftime('%a %b %d %H:%M:%S %Y')
    total = grid.total_free_count
    return [
        scenario_id,
        timestamp,
        description,
        problem.height,
        problem.width,
        total,
        problem.double_price,
        problem.simple_price,
        result.matching_size,
        total - 2 * result.matching_size,
        result.price,
        result.strategy,
        "",
    ]


def gather_failed_row(scenario_id, description, error):
    timestamp = datetime.now().strftime('%a %b %d %H:%M:%S %Y')
    row = [scenario_id, timestamp, description] + [""] * (len(SCENARIO_REPORT_HEADER) - 4)
    row.append(str(error))
    return row


@log_and_time("write_scenario_csv", error_cls=ReportWriteError)
def write_scenario_csv(final_filename, all_scenario_rows):
    """
    Takes a list of scenario rows (from all scenarios),
    writes them to final_filename with a single header row.
    """
    with open(final_filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SCENARIO_REPORT_HEADER)
        writer.writerows(all_scenario_rows)

    logger.info("[OK] Wrote Scenario CSV: %s with %d rows.", final_filename, len(all_scenario_rows))
