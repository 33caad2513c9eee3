"""NameSorter — alphabetical ordering of options by their long name."""

from collections.abc import Iterable
from functools import cmp_to_key

from vim_options.option.domain.option import Option


class NameSorter:
    """Orders options by ``name`` using plain string ordering.

    ``compare`` is a three-way comparator for ``functools.cmp_to_key``;
    ``key`` is the equivalent key function.
    """

    @staticmethod
    def compare(first: Option, second: Option) -> int:
        if first.name < second.name:
            return -1
        if first.name > second.name:
            return 1
        return 0

    @staticmethod
    def key(option: Option) -> str:
        return option.name


def sort_by_name(options: Iterable[Option]) -> list[Option]:
    """Return *options* as a new list in alphabetical order of name."""
    return sorted(options, key=cmp_to_key(NameSorter.compare))
