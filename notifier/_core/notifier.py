from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from logging import Logger, getLogger
from types import TracebackType
from typing import Any, Self, override
from uuid import uuid4

from notifier._core.common.event import Event
from notifier._core.listener import CallbackListener, Listener
from notifier.exceptions import InvalidStateError

"""
Events
"""


@dataclass(frozen=True, slots=True)
class NotifierEvent(Event, ABC):
    notifier: Notifier[Any]


@dataclass(frozen=True, slots=True)
class ListenerSubscribed(NotifierEvent):
    listener: Listener[Any]

    @override
    def __str__(self) -> str:
        return f"`{self.listener}` has subscribed to `{self.notifier}`."


@dataclass(frozen=True, slots=True)
class ListenerUnsubscribed(NotifierEvent):
    listener: Listener[Any]
    count: int

    @override
    def __str__(self) -> str:
        return (
            f"`{self.listener}` has unsubscribed from `{self.notifier}` "
            f"({self.count} registration{"s" if self.count > 1 else ""} removed)."
        )


@dataclass(frozen=True, slots=True)
class StatePublished(NotifierEvent):
    state: Any
    count: int

    @override
    def __str__(self) -> str:
        return (
            f"`{self.notifier}` has published `{self.state!r}` "
            f"to {self.count} listener{"s" if self.count != 1 else ""}."
        )


"""
Subjects
"""


class Subject[T](ABC):
    __slots__ = ()

    @abstractmethod
    def subscribe(self, listener: Listener[T], /) -> Self:
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self, listener: Listener[T], /) -> Self:
        raise NotImplementedError

    @abstractmethod
    def publish(self, state: T, /) -> None:
        raise NotImplementedError


@dataclass(eq=False, frozen=True, slots=True)
class Notifier[T](Subject[T]):
    name: str = field(default_factory=lambda: f"anonymous@{uuid4().hex[:7]}")
    __listeners: list[Listener[T]] = field(
        default_factory=list,
        init=False,
        repr=False,
    )
    __loggers: list[Logger] = field(
        default_factory=lambda: [getLogger("python-notifier")],
        init=False,
        repr=False,
    )

    def __contains__(self, listener: Any, /) -> bool:
        return any(registered is listener for registered in self.__listeners)

    def __iter__(self) -> Iterator[Listener[T]]:
        yield from tuple(self.__listeners)

    def __len__(self) -> int:
        return len(self.__listeners)

    @override
    def subscribe(self, listener: Listener[T], /) -> Self:
        if not isinstance(listener, Listener):
            raise TypeError(f"`{listener!r}` isn't a listener.")

        self.__listeners.append(listener)
        self.__debug(ListenerSubscribed(self, listener))
        return self

    @override
    def unsubscribe(self, listener: Listener[T], /) -> Self:
        listeners = self.__listeners
        kept = [registered for registered in listeners if registered is not listener]
        count = len(listeners) - len(kept)

        if count:
            listeners[:] = kept
            self.__debug(ListenerUnsubscribed(self, listener, count))

        return self

    @override
    def publish(self, state: T, /) -> None:
        if state is None:
            raise InvalidStateError

        listeners = tuple(self.__listeners)

        for listener in listeners:
            listener.receive(state)

        self.__debug(StatePublished(self, state, len(listeners)))

    def listener(  # type: ignore[no-untyped-def]
        self,
        function: Callable[[T], Any] | None = None,
        /,
    ):
        def decorator(fn: Callable[[T], Any]) -> CallbackListener[T]:
            callback_listener = CallbackListener(fn)
            self.subscribe(callback_listener)
            return callback_listener

        return decorator(function) if function is not None else decorator

    def subscription(self, listener: Listener[T], /) -> Subscription[T]:
        return Subscription(listener, self)

    def add_logger(self, logger: Logger) -> Self:
        self.__loggers.append(logger)
        return self

    def __debug(self, event: Event) -> None:
        for logger in tuple(self.__loggers):
            logger.debug(event)


@dataclass(repr=False, frozen=True, slots=True)
class Subscription[T]:
    listener: Listener[T]
    notifier: Subject[T]
    __is_active: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:
        self.notifier.subscribe(self.listener)
        object.__setattr__(self, "_Subscription__is_active", True)

    def __del__(self) -> None:
        self.unsubscribe()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.unsubscribe()

    def keep(self) -> None:
        return

    def unsubscribe(self) -> Self:
        if self.__is_active:
            object.__setattr__(self, "_Subscription__is_active", False)
            self.notifier.unsubscribe(self.listener)

        return self
