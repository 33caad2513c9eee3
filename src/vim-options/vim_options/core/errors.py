"""Base exception class for all vim-options errors."""


class VimOptionsError(Exception):
    """Base class for all vim-options errors.

    Subclasses phrase their message as "Failed to ..." so that callers can
    surface it to the user unchanged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
