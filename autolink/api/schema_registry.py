"""Output models of the commands, keyed by (domain, command).

``autolink.api.link`` registers ``LinkApplyOutput`` as ("link", "apply") and
``LinkRegistryOutput`` as ("link", "registry"); ``validate_output`` looks them
up from the command function.
"""

from pydantic import BaseModel


class SchemaRegistry:
    def __init__(self) -> None:
        self._schemas: dict[tuple[str, str], type[BaseModel]] = {}

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        """Register ``schema_class`` once; a second registration is a programming error."""
        if (domain, command_name) in self._schemas:
            raise ValueError(f"Output model already registered for {domain}.{command_name}")
        self._schemas[(domain, command_name)] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get((domain, command_name))


schema_registry = SchemaRegistry()
