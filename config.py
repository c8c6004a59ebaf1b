# config.py
"""
Centralized solver configuration.
CLI flags and batch scenario rows feed it through update(...) / update_from_row(...).
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from exceptions import ConfigError

STRATEGIES = ("matching", "mip")
SEARCH_MODES = ("iterative", "recursive")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SolverConfig:
    # Grid decoding: this character marks a cell that needs repair
    RepairMarker: str = "*"

    # "matching" runs the augmenting-path engine, "mip" the Gurobi cross-check
    Strategy: str = "matching"
    # "iterative" uses an explicit stack, "recursive" the plain DFS
    SearchMode: str = "iterative"

    # Time limit in seconds for the MIP strategy
    MipTimeLimit: float = 60.0

    # Logging
    LogLevel: str = "WARNING"
    LogDir: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if len(self.RepairMarker) != 1 or self.RepairMarker.isspace():
            raise ConfigError(f"RepairMarker must be one non-whitespace character, got {self.RepairMarker!r}")
        if self.Strategy not in STRATEGIES:
            raise ConfigError(f"Unknown strategy: {self.Strategy!r} (expected one of {STRATEGIES})")
        if self.SearchMode not in SEARCH_MODES:
            raise ConfigError(f"Unknown search mode: {self.SearchMode!r} (expected one of {SEARCH_MODES})")
        if self.MipTimeLimit <= 0:
            raise ConfigError(f"MipTimeLimit must be positive, got {self.MipTimeLimit}")
        if str(self.LogLevel).upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.LogLevel!r} (expected one of {LOG_LEVELS})")

    def update(self, **kwargs) -> None:
        """
        Programmatic override of fields, with safety for unknown keys.
        Example:
            SOLVER.update(Strategy="mip")
        """
        for k in kwargs:
            if not hasattr(self, k):
                raise ConfigError(f"Unknown config field: {k}")
        previous = self.as_dict()
        for k, v in kwargs.items():
            setattr(self, k, v)
        try:
            self.validate()
        except ConfigError:
            for k, v in previous.items():
                setattr(self, k, v)
            raise

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Singleton instance
SOLVER = SolverConfig()


def update_from_row(row, config: SolverConfig = SOLVER) -> None:
    """
    Accepts a pandas Series or dict with these optional keys:
      STRATEGY
      SEARCH_MODE
    Blank or missing values leave the current setting alone.
    """
    # Support both Series and dict
    get = row.get if hasattr(row, "get") else (lambda k: row[k])

    overrides = {}
    for key, field_name in (("STRATEGY", "Strategy"), ("SEARCH_MODE", "SearchMode")):
        value = get(key)
        # value != value catches the NaN pandas uses for empty cells
        if value is None or value != value or str(value).strip() == "":
            continue
        overrides[field_name] = str(value).strip().lower()

    if overrides:
        config.update(**overrides)


__all__ = [
    "SolverConfig",
    "SOLVER",
    "STRATEGIES",
    "SEARCH_MODES",
    "LOG_LEVELS",
    "update_from_row",
]
