"""Utility decorators for logging client calls."""
import inspect
import functools
import time
from typing import Callable

from currency_converter.utils.logging import get_logger

logger = get_logger(__name__)


def log_execution(log_args: bool = True, log_result: bool = False):
    """
    Decorator to log function execution with timing.

    Args:
        log_args: Whether to log function arguments
        log_result: Whether to log function result

    Example:
        @log_execution(log_args=False, log_result=True)
        async def convert(self, from_code, to_code, amount):
            ...
    """
    def decorator(func: Callable):
        def _start(args, kwargs) -> dict:
            extra = {"function": func.__name__}
            if log_args:
                extra["function_args"] = str(args)[:100]  # Truncate long args
                extra["function_kwargs"] = str(kwargs)[:100]
            logger.debug(f"Starting {func.__name__}", extra=extra)
            return extra

        def _completed(start_time: float, result) -> None:
            execution_time = (time.time() - start_time) * 1000  # ms
            log_extra = {"function": func.__name__, "execution_time_ms": round(execution_time, 2)}
            if log_result:
                log_extra["result"] = str(result)[:100]
            logger.info(f"Completed {func.__name__}", extra=log_extra)

        def _failed(start_time: float, error: Exception) -> None:
            execution_time = (time.time() - start_time) * 1000
            logger.error(
                f"Failed {func.__name__}",
                extra={"function": func.__name__, "execution_time_ms": round(execution_time, 2), "error": str(error)}
            )

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = time.time()
            _start(args, kwargs)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _failed(start_time, e)
                raise
            _completed(start_time, result)
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = time.time()
            _start(args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _failed(start_time, e)
                raise
            _completed(start_time, result)
            return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
