"""Audit logging utilities for sc-parser.

Helpers that add structured context to log records so tool calls can be
followed in both the human-readable and the JSON log.
"""

import functools
import inspect
import logging
import time
import typing as t

from datetime import timedelta
from enum import StrEnum

from sc_parser.config import CONFIG
from sc_parser.utils import truncate


Function: t.TypeAlias = t.Callable[..., t.Any]


class Event(StrEnum):
    TOOL_CALL = "TOOL_CALL"
    TOOL_COMPLETE = "TOOL_COMPLETE"


class Status(StrEnum):
    success = "success"
    error = "error"


def summarize_parameters(params: dict[str, t.Any], limit: int | None = None) -> dict[str, t.Any]:
    """
    Shorten parameter values for logging.

    Raw sc output can run to thousands of lines; string values longer than
    `limit` are cut down and annotated with their original length.

    Args:
        params: Dictionary of parameters to summarize
        limit: Maximum characters kept per string value. Defaults to
            CONFIG.max_logged_output.

    Returns:
        Dictionary with long strings shortened
    """
    if not params:
        return params

    limit = CONFIG.max_logged_output if limit is None else limit
    summary = {}
    for key, value in params.items():
        if isinstance(value, str):
            summary[key] = truncate(value, limit).replace("\r", "\\r").replace("\n", "\\n")
        elif isinstance(value, dict):
            summary[key] = summarize_parameters(value, limit)
        else:
            summary[key] = value

    return summary


def _log_event_start(logger: logging.Logger, tool_name: str, params: dict[str, t.Any]) -> int:
    """
    Emit a log event and return a performance counter timestamp.

    The timestamp is in nanoseconds. It is meant to be used to calculate
    total execution time.
    """
    extra = {"tool": tool_name}
    message = f"{Event.TOOL_CALL}: {tool_name}"

    params_str = ", ".join(f"{k}={v}" for k, v in summarize_parameters(params).items())
    if params_str:
        message += f" | {params_str}"

    logger.info(message, extra=extra)

    return time.perf_counter_ns()


def _log_event_complete(
    logger: logging.Logger,
    tool_name: str,
    start_time: int,
    error: Exception | None = None,
) -> None:
    """
    Log the completion of a tool call and calculate the total execution time.
    """
    stop_time = time.perf_counter_ns()
    duration = timedelta(microseconds=(stop_time - start_time) / 1_000)
    extra = {
        "tool": tool_name,
        "status": Status.error if error else Status.success,
        "duration": f"{duration.total_seconds():.6f}s",
    }

    message = f"{Event.TOOL_COMPLETE}: {tool_name}"

    if error:
        extra["error"] = str(error)
        message += f" | error: {error}"
        logger.error(message, extra=extra)
    else:
        logger.info(message, extra=extra)


def log_tool_call(func: t.Callable) -> Function:
    """Decorator to log tool calls

    Works with sync or async functions. Exceptions are logged and re-raised.
    """
    logger = logging.getLogger("sc-parser")
    tool_name = func.__name__

    signature = inspect.signature(func)

    def _arguments(args, kwargs) -> dict[str, t.Any]:
        arguments = {}
        for name, value in signature.bind_partial(*args, **kwargs).arguments.items():
            if signature.parameters[name].kind is inspect.Parameter.VAR_KEYWORD:
                arguments.update(value)
            else:
                arguments[name] = value

        return arguments

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = _log_event_start(logger, tool_name, _arguments(args, kwargs))
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            _log_event_complete(logger, tool_name, start_time, exc)
            raise

        _log_event_complete(logger, tool_name, start_time)
        return result

    @functools.wraps(func)
    async def awrapper(*args, **kwargs):
        start_time = _log_event_start(logger, tool_name, _arguments(args, kwargs))
        try:
            result = await func(*args, **kwargs)
        except Exception as exc:
            _log_event_complete(logger, tool_name, start_time, exc)
            raise

        _log_event_complete(logger, tool_name, start_time)
        return result

    if inspect.iscoroutinefunction(func):
        return awrapper

    return wrapper
