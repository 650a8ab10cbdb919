"""Exceptions raised by colalign."""


class ColalignError(Exception):
    """Base class for colalign errors."""


class InvalidSpecError(ColalignError, ValueError):
    """The alignment specifier contains something other than directives.

    Attributes:
        spec: The specifier string that failed to parse
        position: Index of the offending character in ``spec``
    """

    def __init__(self, message: str, spec: str = "", position: int = -1):
        super().__init__(message)
        self.spec = spec
        self.position = position


class ConfigError(ColalignError, ValueError):
    """Invalid configuration content or option value."""
