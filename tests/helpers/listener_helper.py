from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from notifier import Listener


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class ListenerHistory(Listener[Any]):
    __history: list[Any] = field(default_factory=list, init=False)

    def __iter__(self) -> Iterator[Any]:
        yield from self.__history

    def __len__(self) -> int:
        return len(self.__history)

    def assert_length(self, length: int):
        assert len(self) == length

    def receive(self, state: Any, /):
        self.__history.append(state)


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class RecordingListener(Listener[Any]):
    """
    Listener appending `(name, state)` to a shared journal, to check notification order
    across several listeners.
    """

    name: str
    journal: list[tuple[str, Any]]
    side_effect: Callable[[Any], Any] | None = None

    def receive(self, state: Any, /):
        self.journal.append((self.name, state))

        if self.side_effect is not None:
            self.side_effect(state)
