"""Error types raised by config infrastructure."""

from pathlib import Path

from vim_options.core.errors import VimOptionsError


class ConfigValidationError(VimOptionsError):
    """Raised when an option definitions file fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate option definitions: {reason}")


class ConfigLoadError(VimOptionsError):
    """Raised when an option definitions file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load option definitions: {reason}: {path}")
