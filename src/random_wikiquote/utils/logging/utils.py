# ABOUTME: structlog helpers for the quote pipeline: named loggers, MediaWiki call logging, run context
# ABOUTME: Pipeline context lives in contextvars so every stage log carries the run's operation id

import functools
import time
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import structlog

F = TypeVar("F", bound=Callable[..., Any])

# MediaWiki request parameters worth repeating on the log line, with the key they are logged under
_LOGGED_PARAMS = {"action": "action", "pageid": "page_id", "section": "section_index"}


def get_logger(name: str = "random_wikiquote") -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)


def new_operation_id() -> str:
    """Short random id tying together the log lines of one pipeline run."""
    return uuid.uuid4().hex[:8]


def _request_context(args: tuple, kwargs: dict) -> dict[str, Any]:
    params = kwargs.get("params")
    if params is None:
        params = next((arg for arg in args if isinstance(arg, dict)), None)
    if not params:
        return {}
    return {key: params[param] for param, key in _LOGGED_PARAMS.items() if param in params}


def log_api_call(api_name: str) -> Callable[[F], F]:
    """Log each MediaWiki request made by the wrapped coroutine.

    The request's ``action``, ``pageid`` and ``section`` parameters are read from
    the ``params`` mapping and bound as ``action``, ``page_id`` and ``section_index``.
    Success is logged at debug level with the elapsed time; failures at warning
    level before the exception propagates.
    """

    def decorator(func: F) -> F:
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            request_logger = logger.bind(api_name=api_name, **_request_context(args, kwargs))
            started = time.perf_counter()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                request_logger.warning(
                    "MediaWiki request failed",
                    duration_seconds=round(time.perf_counter() - started, 3),
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise

            request_logger.debug("MediaWiki request done", duration_seconds=round(time.perf_counter() - started, 3))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


@contextmanager
def with_pipeline_context(pipeline_name: str, **context) -> Iterator[structlog.typing.FilteringBoundLogger]:
    """Bind ``pipeline``, a fresh ``operation_id`` and ``context`` for the duration of a run.

    The values go into structlog's contextvars, so stage loggers created elsewhere
    pick them up too. A failure escaping the block is logged once, then re-raised.
    """
    with structlog.contextvars.bound_contextvars(
        pipeline=pipeline_name, operation_id=new_operation_id(), **context
    ):
        logger = get_logger("random_wikiquote.pipeline")
        try:
            yield logger
        except Exception as e:
            logger.error("Pipeline failed", error_type=type(e).__name__, error=str(e))
            raise
