"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F, display_format: str = "yaml") -> F:
    """Wrap a command function so its StageResult is displayed and sets the exit code.

    Args:
        func: Function that returns StageResult
        display_format: ``json`` or ``yaml`` for the stdout payload
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
