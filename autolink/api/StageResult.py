"""Staged result returned by the ``cmd_*`` functions of the link commands."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What ``cmd_apply``/``cmd_registry`` hand to the CLI.

    ``announce`` is shown before any work runs. Iterating
    ``progress_callback(result)`` performs the linking or registry build,
    yields ``(fraction, message)`` pairs and fills in ``result`` (one-line
    summary), ``output`` (the dumped output model) and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
