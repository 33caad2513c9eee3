"""ToggleOption — the boolean option variant (``:set wrap`` / ``:set nowrap``)."""

from vim_options.option.domain.listener import OptionChangeListener
from vim_options.option.domain.notifier import ChangeNotifier
from vim_options.option.domain.option import OptionIdentity, OptionKind


class ToggleOption:
    """An option that is either on or off."""

    kind = OptionKind.BOOLEAN

    def __init__(self, name: str, abbreviation: str, default: bool) -> None:
        self._identity = OptionIdentity(name=name, abbreviation=abbreviation)
        self._notifier = ChangeNotifier()
        self._default = default
        self._value = default

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def abbreviation(self) -> str:
        return self._identity.abbreviation

    @property
    def value(self) -> bool:
        return self._value

    @property
    def default(self) -> bool:
        return self._default

    def add_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.add(listener)

    def remove_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.remove(listener)

    def set(self) -> None:
        self._update(True)

    def reset(self) -> None:
        self._update(False)

    def toggle(self) -> None:
        self._update(not self._value)

    def is_default(self) -> bool:
        return self._value == self._default

    def reset_to_default(self) -> None:
        self._update(self._default)

    def _update(self, value: bool) -> None:
        if value == self._value:
            return
        self._value = value
        self._notifier.notify(self)

    def __str__(self) -> str:
        return f"  {self.name}" if self._value else f"no{self.name}"

    def __repr__(self) -> str:
        return f"ToggleOption(name={self.name!r}, value={self._value!r})"
