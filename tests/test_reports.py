import csv
from types import SimpleNamespace

import pytest

from exceptions import ReportWriteError
from reports import SCENARIO_REPORT_HEADER, gather_failed_row, gather_scenario_row, write_scenario_csv


class TestReports:
    def test_gather_scenario_row(self):
        problem = SimpleNamespace(height=1, width=2, double_price=3, simple_price=2)
        grid = SimpleNamespace(total_free_count=2)
        result = SimpleNamespace(matching_size=1, price=3, strategy="matching")
        row = dict(zip(SCENARIO_REPORT_HEADER, gather_scenario_row("s1", "pair", problem, grid, result)))
        assert row["DOUBLE_PATCHES"] == 1
        assert row["SIMPLE_PATCHES"] == 0
        assert row["MIN_PRICE"] == 3
        assert row["ERROR"] == ""

    def test_failed_row_has_header_width(self):
        row = gather_failed_row("s2", "broken", ValueError("bad grid"))
        assert len(row) == len(SCENARIO_REPORT_HEADER)
        assert row[-1] == "bad grid"
        assert row[SCENARIO_REPORT_HEADER.index("MIN_PRICE")] == ""

    def test_write_scenario_csv(self, tmp_path):
        path = tmp_path / "out.csv"
        write_scenario_csv(str(path), [gather_failed_row("s2", "", "oops")])
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == SCENARIO_REPORT_HEADER
        assert rows[1][0] == "s2"

    def test_write_failure_is_wrapped(self, tmp_path):
        with pytest.raises(ReportWriteError):
            write_scenario_csv(str(tmp_path / "missing" / "out.csv"), [])
