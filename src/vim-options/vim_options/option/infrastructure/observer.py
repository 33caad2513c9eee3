"""Structlog implementation of the RegistryObserver port."""

import structlog


class StructlogRegistryObserver:
    """Delegates option registry events to structlog.

    Satisfies the RegistryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def option_registered(self, name: str, abbreviation: str, kind: str) -> None:
        self._log.debug(
            "option.registered", name=name, abbreviation=abbreviation, kind=kind
        )

    def option_changed(self, name: str, value: object, is_default: bool) -> None:
        self._log.info(
            "option.changed", name=name, value=value, is_default=is_default
        )

    def options_reset(self, total: int, changed: int) -> None:
        self._log.info("option.reset_all", total=total, changed=changed)
