"""Observer port for the option registry — defines events in domain language."""

from typing import Protocol


class RegistryObserver(Protocol):
    def option_registered(self, name: str, abbreviation: str, kind: str) -> None: ...

    def option_changed(self, name: str, value: object, is_default: bool) -> None: ...

    def options_reset(self, total: int, changed: int) -> None: ...
