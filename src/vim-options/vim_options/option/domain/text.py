"""String and list option variants — options whose value is text."""

import re
from collections.abc import Sequence

from vim_options.option.domain.errors import InvalidOptionValueError
from vim_options.option.domain.listener import OptionChangeListener
from vim_options.option.domain.notifier import ChangeNotifier
from vim_options.option.domain.option import OptionIdentity, OptionKind


class StringOption:
    """An option holding free-form text (``:set selection=exclusive``)."""

    kind = OptionKind.STRING

    def __init__(self, name: str, abbreviation: str, default: str) -> None:
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
    def value(self) -> str:
        return self._value

    @property
    def default(self) -> str:
        return self._default

    def add_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.add(listener)

    def remove_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.remove(listener)

    def set(self, text: str) -> None:
        self._update(text)

    def append(self, text: str) -> None:
        self._update(self._value + text)

    def prepend(self, text: str) -> None:
        self._update(text + self._value)

    def remove(self, text: str) -> None:
        """Remove the first occurrence of *text*.

        Raises:
            InvalidOptionValueError: if *text* does not occur in the value.
        """
        if not text or text not in self._value:
            raise InvalidOptionValueError(
                option_name=self.name, reason=f"{text!r} is not part of the value"
            )
        self._update(self._value.replace(text, "", 1))

    def is_default(self) -> bool:
        return self._value == self._default

    def reset_to_default(self) -> None:
        self._update(self._default)

    def _update(self, value: str) -> None:
        if value == self._value:
            return
        self._value = value
        self._notifier.notify(self)

    def __str__(self) -> str:
        return f"  {self.name}={self._value}"

    def __repr__(self) -> str:
        return f"StringOption(name={self.name!r}, value={self._value!r})"


class ListOption:
    """An option holding an ordered, comma-separated list of items.

    When ``pattern`` is given every item must match it in full; a value with
    a non-matching item is rejected as a whole.
    """

    kind = OptionKind.LIST

    def __init__(
        self,
        name: str,
        abbreviation: str,
        default: Sequence[str],
        pattern: str | None = None,
    ) -> None:
        self._identity = OptionIdentity(name=name, abbreviation=abbreviation)
        self._notifier = ChangeNotifier()
        self._pattern = re.compile(pattern) if pattern is not None else None
        self._check_default(default)
        self._check_items(default)
        self._default = tuple(default)
        self._value = self._default

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def abbreviation(self) -> str:
        return self._identity.abbreviation

    @property
    def value(self) -> tuple[str, ...]:
        return self._value

    @property
    def default(self) -> tuple[str, ...]:
        return self._default

    @property
    def text(self) -> str:
        return ",".join(self._value)

    def add_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.add(listener)

    def remove_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.remove(listener)

    def contains(self, item: str) -> bool:
        return item in self._value

    def set(self, text: str) -> None:
        """Replace the list with the comma-separated items of *text*.

        Raises:
            InvalidOptionValueError: if an item does not match the pattern.
        """
        self._update(tuple(self._parse(text)))

    def append(self, text: str) -> None:
        """Add the items of *text* that are not yet present, at the end."""
        merged = list(self._value)
        for item in self._parse(text):
            if item not in merged:
                merged.append(item)
        self._update(tuple(merged))

    def prepend(self, text: str) -> None:
        """Add the items of *text* that are not yet present, at the front."""
        added: list[str] = []
        for item in self._parse(text):
            if item not in self._value and item not in added:
                added.append(item)
        self._update(tuple(added) + self._value)

    def remove(self, text: str) -> None:
        """Drop every item of *text* present in the list."""
        removed = set(self._parse(text))
        self._update(tuple(item for item in self._value if item not in removed))

    def is_default(self) -> bool:
        return self._value == self._default

    def reset_to_default(self) -> None:
        self._update(self._default)

    def _parse(self, text: str) -> list[str]:
        items = [item for item in text.split(",") if item]
        self._check_items(items)
        return items

    def _check_default(self, default: Sequence[str]) -> None:
        # The default must survive a round trip through ``text`` and ``set``.
        for item in default:
            if not item or "," in item:
                raise InvalidOptionValueError(
                    option_name=self.name,
                    reason=f"{item!r} is not a single list item",
                )
        if len(set(default)) != len(default):
            raise InvalidOptionValueError(
                option_name=self.name, reason="default list repeats an item"
            )

    def _check_items(self, items: Sequence[str]) -> None:
        if self._pattern is None:
            return
        for item in items:
            if self._pattern.fullmatch(item) is None:
                raise InvalidOptionValueError(
                    option_name=self.name,
                    reason=f"{item!r} does not match {self._pattern.pattern!r}",
                )

    def _update(self, value: tuple[str, ...]) -> None:
        if value == self._value:
            return
        self._value = value
        self._notifier.notify(self)

    def __str__(self) -> str:
        return f"  {self.name}={self.text}"

    def __repr__(self) -> str:
        return f"ListOption(name={self.name!r}, value={self._value!r})"
