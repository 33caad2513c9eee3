"""OptionRegistry — owns option uniqueness and resolves names and abbreviations."""

from collections.abc import Iterator

from vim_options.option.domain.errors import DuplicateOptionError, UnknownOptionError
from vim_options.option.domain.event import OptionChangeEvent
from vim_options.option.domain.observer import RegistryObserver
from vim_options.option.domain.option import Option
from vim_options.option.domain.sorting import sort_by_name


class OptionRegistry:
    """The set of options known to one editor session.

    A name or abbreviation may identify at most one option, across both
    namespaces. The registry listens to every option it holds and reports
    each value change to its observer.
    """

    def __init__(self, observer: RegistryObserver) -> None:
        self._observer = observer
        self._by_name: dict[str, Option] = {}
        self._by_abbreviation: dict[str, Option] = {}

    def register(self, option: Option) -> None:
        """Add *option* to the registry.

        Raises:
            DuplicateOptionError: if its name or abbreviation is already taken.
        """
        for key in (option.name, option.abbreviation):
            if key in self._by_name or key in self._by_abbreviation:
                raise DuplicateOptionError(name=key)

        self._by_name[option.name] = option
        self._by_abbreviation[option.abbreviation] = option
        option.add_change_listener(self)
        self._observer.option_registered(
            name=option.name,
            abbreviation=option.abbreviation,
            kind=str(option.kind),
        )

    def get(self, name: str) -> Option | None:
        """Resolve a full name or an abbreviation; full names take precedence."""
        option = self._by_name.get(name)
        if option is None:
            option = self._by_abbreviation.get(name)
        return option

    def require(self, name: str) -> Option:
        """Like ``get`` but raises UnknownOptionError instead of returning None."""
        option = self.get(name)
        if option is None:
            raise UnknownOptionError(name=name)
        return option

    def options(self) -> list[Option]:
        return sort_by_name(self._by_name.values())

    def changed(self) -> list[Option]:
        return [option for option in self.options() if not option.is_default()]

    def reset_all(self) -> None:
        changed = self.changed()
        for option in changed:
            option.reset_to_default()
        self._observer.options_reset(total=len(self), changed=len(changed))

    def option_value_changed(self, event: OptionChangeEvent) -> None:
        option = event.option
        self._observer.option_changed(
            name=option.name,
            value=option.value,
            is_default=option.is_default(),
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options())
