from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, override


class Listener[T](ABC):
    __slots__ = ("__weakref__",)

    @abstractmethod
    def receive(self, state: T, /) -> None:
        raise NotImplementedError


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class CallbackListener[T](Listener[T]):
    function: Callable[[T], Any] | None = None

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.function!r})"

    @override
    def receive(self, state: T, /) -> None:
        function = self.function

        if function is None:
            return

        function(state)
