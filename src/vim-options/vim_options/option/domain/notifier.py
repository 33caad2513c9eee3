"""ChangeNotifier — ordered listener registrations and synchronous delivery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_options.option.domain.event import OptionChangeEvent
from vim_options.option.domain.listener import OptionChangeListener

if TYPE_CHECKING:
    from vim_options.option.domain.option import Option


class ChangeNotifier:
    """Holds the change listeners of one option and notifies them in order.

    Registrations are not deduplicated: a listener added twice is notified
    twice per change and must be removed twice.

    ``notify`` delivers to a snapshot of the registrations taken when it
    starts, so listeners added or removed while a notification is in flight
    only take part from the next one. A listener that raises stops delivery
    to the listeners after it and the exception reaches the caller.
    """

    def __init__(self) -> None:
        self._listeners: list[OptionChangeListener] = []

    @property
    def listeners(self) -> tuple[OptionChangeListener, ...]:
        return tuple(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def add(self, listener: OptionChangeListener) -> None:
        self._listeners.append(listener)

    def remove(self, listener: OptionChangeListener) -> None:
        """Remove the first registration of *listener*; no-op if absent."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def notify(self, option: Option) -> None:
        event = OptionChangeEvent(option=option)
        for listener in tuple(self._listeners):
            listener.option_value_changed(event)
