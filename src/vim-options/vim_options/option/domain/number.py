"""NumberOption — the numeric option variant (``:set tabstop=4``)."""

import re
import sys

from vim_options.option.domain.errors import InvalidOptionValueError
from vim_options.option.domain.listener import OptionChangeListener
from vim_options.option.domain.notifier import ChangeNotifier
from vim_options.option.domain.option import OptionIdentity, OptionKind

# Decimal, 0x-prefixed hexadecimal or 0-prefixed octal, with an optional sign.
_NUMBER_PATTERN = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def parse_number(text: str) -> int | None:
    """Parse *text* the way the editor reads numbers; ``None`` if malformed."""
    match = _NUMBER_PATTERN.fullmatch(text.strip())
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        number = int(digits[2:], 16)
    elif digits.startswith("0"):
        number = int(digits, 8)
    else:
        number = int(digits)
    return -number if sign == "-" else number


class NumberOption:
    """An integer option bounded by an inclusive ``[minimum, maximum]`` range.

    ``append``, ``prepend`` and ``remove`` follow the editor's ``+=``, ``^=``
    and ``-=`` operators: add, multiply and subtract.
    """

    kind = OptionKind.NUMBER

    def __init__(
        self,
        name: str,
        abbreviation: str,
        default: int,
        minimum: int = 0,
        maximum: int = sys.maxsize,
    ) -> None:
        self._identity = OptionIdentity(name=name, abbreviation=abbreviation)
        self._notifier = ChangeNotifier()
        self._minimum = minimum
        self._maximum = maximum
        self._check_value(default)
        self._default = default
        self._value = default

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def abbreviation(self) -> str:
        return self._identity.abbreviation

    @property
    def value(self) -> int:
        return self._value

    @property
    def default(self) -> int:
        return self._default

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def maximum(self) -> int:
        return self._maximum

    def add_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.add(listener)

    def remove_change_listener(self, listener: OptionChangeListener) -> None:
        self._notifier.remove(listener)

    def set(self, value: int) -> None:
        """Set the value.

        Raises:
            InvalidOptionValueError: if *value* is not an integer or lies outside
                the bounds.
        """
        self._check_value(value)
        self._update(value)

    def parse(self, text: str) -> None:
        """Set the value from decimal, hexadecimal or octal *text*.

        Raises:
            InvalidOptionValueError: if *text* is not a number or is out of bounds.
        """
        number = parse_number(text)
        if number is None:
            raise InvalidOptionValueError(
                option_name=self.name, reason=f"not a number: {text!r}"
            )
        self.set(number)

    def append(self, value: int) -> None:
        self.set(self._value + value)

    def prepend(self, value: int) -> None:
        self.set(self._value * value)

    def remove(self, value: int) -> None:
        self.set(self._value - value)

    def is_default(self) -> bool:
        return self._value == self._default

    def reset_to_default(self) -> None:
        self._update(self._default)

    def _check_value(self, value: int) -> None:
        if type(value) is not int:
            raise InvalidOptionValueError(
                option_name=self.name, reason=f"{value!r} is not an integer"
            )
        if not self._minimum <= value <= self._maximum:
            raise InvalidOptionValueError(
                option_name=self.name,
                reason=(
                    f"{value} is outside the range "
                    f"{self._minimum}..{self._maximum}"
                ),
            )

    def _update(self, value: int) -> None:
        if value == self._value:
            return
        self._value = value
        self._notifier.notify(self)

    def __str__(self) -> str:
        return f"  {self.name}={self._value}"

    def __repr__(self) -> str:
        return f"NumberOption(name={self.name!r}, value={self._value!r})"
