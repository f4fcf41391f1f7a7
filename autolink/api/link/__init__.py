"""Link API domain."""

from ..schema_registry import schema_registry
from .LinkApplyOutput import LinkApplyOutput
from .LinkRegistryOutput import LinkRegistryOutput

schema_registry.register_output_schema("link", "apply", LinkApplyOutput)
schema_registry.register_output_schema("link", "registry", LinkRegistryOutput)

__all__ = [
    "LinkApplyOutput",
    "LinkRegistryOutput",
]
