"""
Reusable decorators for timing and exception logging.
"""
import time
import logging
from functools import wraps
from typing import Optional, Type

def log_and_time(phase_name: Optional[str] = None, error_cls: Type[BaseException] = Exception, rethrow: bool = True):
    """
    Logs start/end/duration and logs exceptions with stack traces.
    On error, rethrows as error_cls by default. Errors that already are
    error_cls instances propagate unchanged.
    """
    def outer(func):
        @wraps(func)
        def inner(*args, **kwargs):
            logger = logging.getLogger(func.__module__)
            name = phase_name or func.__name__
            t0 = time.perf_counter()
            logger.info("%s start", name)
            try:
                result = func(*args, **kwargs)
                dt = time.perf_counter() - t0
                logger.info("%s done in %.3fs", name, dt)
                return result
            except Exception as e:
                dt = time.perf_counter() - t0
                logger.exception("%s failed after %.3fs: %s", name, dt, e)
                if not rethrow:
                    return None
                if isinstance(e, error_cls):
                    raise
                raise error_cls(str(e)) from e
        return inner
    return outer
