from contextvars import ContextVar
from typing import Any, Callable, Optional

from fastapi import BackgroundTasks

from codeguardian.utils.logger import logger

# Context variable to hold the BackgroundTasks object for the current request
bg_tasks_cv: ContextVar[Optional[BackgroundTasks]] = ContextVar(
    "bg_tasks", default=None
)


def guarded(fn: Callable[..., Any], name: str) -> Callable[..., Any]:
    """Wraps ``fn`` so an exception ends the task with a log entry instead of escaping."""

    def run(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            logger.exception(f"Background task '{name}' failed: {e}")
            return None

    return run


class BackgroundTaskRunner:
    """Schedules work to run after the current HTTP response has been sent.

    Tasks go onto the request's ``BackgroundTasks``; there is no queue, no
    pool limit and no cancellation. Each task is wrapped in ``guarded``.
    """

    def spawn(self, fn: Callable[..., Any], *args, name: str = None) -> None:
        background_tasks = bg_tasks_cv.get()
        if background_tasks is None:
            raise RuntimeError(
                "FastAPI BackgroundTasks not found in context. Is the endpoint setting it?"
            )
        name = name or getattr(fn, "__name__", repr(fn))
        background_tasks.add_task(guarded(fn, name), *args)
