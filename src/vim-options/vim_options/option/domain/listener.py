"""OptionChangeListener port — the single-method observer capability."""

from typing import Protocol

from vim_options.option.domain.event import OptionChangeEvent


class OptionChangeListener(Protocol):
    def option_value_changed(self, event: OptionChangeEvent) -> None: ...
