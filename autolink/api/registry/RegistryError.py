"""Registry construction error."""


class RegistryError(ValueError):
    """Raised when descriptor input as a whole cannot be turned into a registry."""
