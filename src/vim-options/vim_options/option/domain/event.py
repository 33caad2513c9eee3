"""OptionChangeEvent — the notification payload delivered to change listeners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vim_options.option.domain.option import Option


@dataclass(frozen=True)
class OptionChangeEvent:
    """Identifies the option whose value changed.

    Carries no value: listeners re-read the current value from ``option``.
    """

    option: Option
