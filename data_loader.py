"""
Input side of the solver: the plain-text problem format and the batch
scenario table.

Text format: four non-negative integers (height, width, double price,
simple price) followed by height rows of width non-whitespace characters.
Whitespace between cells and rows is skipped.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd

import wall_utils.logging as logging
from exceptions import InputFormatError, ScenarioLoadError

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("height", "width", "double_price", "simple_price")
SCENARIO_REQUIRED_COLUMNS = ("SCENARIO_ID", "INPUT_PATH")


@dataclass
class ProblemInput:
    height: int
    width: int
    double_price: int
    simple_price: int
    rows: List[str]


def parse_input(text: str) -> ProblemInput:
    tokens = text.split()
    if len(tokens) < len(HEADER_FIELDS):
        raise InputFormatError(
            f"Expected {len(HEADER_FIELDS)} header integers ({', '.join(HEADER_FIELDS)}), got {len(tokens)} tokens"
        )

    header = {}
    for name, token in zip(HEADER_FIELDS, tokens):
        try:
            value = int(token)
        except ValueError:
            raise InputFormatError(f"{name} must be an integer, got {token!r}") from None
        if value < 0:
            raise InputFormatError(f"{name} must be non-negative, got {value}")
        header[name] = value

    height = header["height"]
    width = header["width"] if height else 0
    body = "".join(tokens[len(HEADER_FIELDS):])

    expected = height * width
    if len(body) != expected:
        raise InputFormatError(f"Expected {height}x{width}={expected} grid cells, got {len(body)}")

    rows = [body[r * width:(r + 1) * width] for r in range(height)]
    logger.debug("Parsed input: %dx%d grid, prices double=%d simple=%d",
                 height, width, header["double_price"], header["simple_price"])
    return ProblemInput(height, width, header["double_price"], header["simple_price"], rows)


def read_input(stream) -> ProblemInput:
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise InputFormatError(f"Input is not valid UTF-8: {e}") from e
    return parse_input(text)


def load_input_file(path) -> ProblemInput:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Cannot read {path}: {e}") from e
    return parse_input(text)


def load_scenarios(csv_path) -> pd.DataFrame:
    """
    Read the scenario table. Required columns: SCENARIO_ID, INPUT_PATH.
    Optional: DESCRIPTION, STRATEGY, SEARCH_MODE. Relative INPUT_PATH values
    are resolved against the table's own directory.
    """
    csv_path = Path(csv_path)
    try:
        df = pd.read_csv(csv_path, dtype={"SCENARIO_ID": str})
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ScenarioLoadError(f"Error reading {csv_path}: {e}") from e

    missing = [c for c in SCENARIO_REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ScenarioLoadError(f"Scenario table {csv_path} is missing columns: {missing}")

    df = df.dropna(subset=["SCENARIO_ID", "INPUT_PATH"]).copy()
    if "DESCRIPTION" not in df.columns:
        df["DESCRIPTION"] = ""
    df["DESCRIPTION"] = df["DESCRIPTION"].fillna("")

    base = csv_path.parent
    df["INPUT_PATH"] = [
        str(p if p.is_absolute() else base / p)
        for p in (Path(str(v)) for v in df["INPUT_PATH"])
    ]

    logger.info("Loaded %d scenarios from %s", len(df), csv_path)
    return df
