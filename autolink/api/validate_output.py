"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from .schema_registry import schema_registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output dict against the schema registered for ``func``.

    The domain is taken from the module path (``autolink.api.<domain>``) and
    the command from the function name (``cmd_<command>``).

    Raises:
        ValueError: If validation fails
    """
    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[0] != "autolink" or module_parts[1] != "api":
        return output

    func_name = func.__name__
    if not func_name.startswith("cmd_"):
        return output

    domain = module_parts[2]
    command_name = func_name[4:]
    schema_class = schema_registry.get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}") from e
