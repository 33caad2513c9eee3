"""Formats options the way the editor's ``:set`` command lists them."""

from collections.abc import Sequence

from vim_options.option.domain.option import Option

_HEADER = "--- Options ---"

# Entries at least this wide get a line of their own after the columns.
_COLUMN_WIDTH = 20


def format_listing(options: Sequence[Option], width: int = 80) -> list[str]:
    """Return the listing lines for *options*, kept in the order given.

    Short entries are laid out in columns filled top to bottom, then left to
    right; long entries follow, one per line.
    """
    entries = [str(option) for option in options]
    short = [entry for entry in entries if len(entry) < _COLUMN_WIDTH]
    long = [entry for entry in entries if len(entry) >= _COLUMN_WIDTH]

    lines = [_HEADER]
    if short:
        columns = max(1, width // _COLUMN_WIDTH)
        rows = -(-len(short) // columns)
        for row in range(rows):
            cells = short[row::rows]
            lines.append("".join(cell.ljust(_COLUMN_WIDTH) for cell in cells).rstrip())
    lines.extend(long)
    return lines
