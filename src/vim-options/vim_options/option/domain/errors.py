"""Error types raised by options and the option registry."""

from vim_options.core.errors import VimOptionsError


class InvalidOptionValueError(VimOptionsError):
    """Raised when a value is rejected by an option; the option is left unchanged."""

    def __init__(self, option_name: str, reason: str) -> None:
        self.option_name = option_name
        self.reason = reason
        super().__init__(f"Failed to set option '{option_name}': {reason}")


class DuplicateOptionError(VimOptionsError):
    """Raised when a name or abbreviation is already taken in a registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Failed to register option: name or abbreviation '{name}' is already in use"
        )


class UnknownOptionError(VimOptionsError):
    """Raised when a name or abbreviation resolves to no registered option."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to find option: unknown option '{name}'")
