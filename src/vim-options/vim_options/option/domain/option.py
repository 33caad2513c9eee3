"""Option capability — identity, default tracking and change registration.

Concrete variants (toggle, number, string, list) do not share a base class.
Each one composes an ``OptionIdentity`` and a ``ChangeNotifier`` and satisfies
the ``Option`` protocol structurally.
"""

from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, Field

from vim_options.option.domain.listener import OptionChangeListener


class OptionKind(StrEnum):
    """Tag identifying which variant an option is."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"


class OptionIdentity(BaseModel, frozen=True):
    """Long and short name of an option; fixed for the option's lifetime."""

    name: str = Field(min_length=1)
    abbreviation: str = Field(min_length=1)


class Option(Protocol):
    """A named, observable setting with a current value and a default.

    Implementations notify their listeners exactly when the value changes to
    a different value, including through ``reset_to_default``.
    """

    @property
    def name(self) -> str: ...

    @property
    def abbreviation(self) -> str: ...

    @property
    def kind(self) -> OptionKind: ...

    @property
    def value(self) -> object: ...

    @property
    def default(self) -> object: ...

    def add_change_listener(self, listener: OptionChangeListener) -> None: ...

    def remove_change_listener(self, listener: OptionChangeListener) -> None: ...

    def is_default(self) -> bool: ...

    def reset_to_default(self) -> None: ...
