"""
Context utilities to inject the current scenario ID into log records.
"""
import logging
from contextvars import ContextVar
from contextlib import contextmanager
from typing import Optional

scenario_id_var: ContextVar[Optional[str]] = ContextVar("scenario_id", default=None)

def set_context(scenario_id: Optional[str] = None) -> None:
    if scenario_id is not None:
        scenario_id_var.set(str(scenario_id))

class LogContextFilter(logging.Filter):
    """
    Adds contextvars to LogRecord so formatters can print them.
    """
    def filter(self, record: logging.LogRecord) -> bool:
        record.scenario_id = scenario_id_var.get() or "-"
        return True

@contextmanager
def scenario_context(scenario_id: str):
    prev = scenario_id_var.get()
    try:
        set_context(scenario_id)
        yield
    finally:
        scenario_id_var.set(prev)
