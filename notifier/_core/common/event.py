from abc import ABC, abstractmethod


class Event(ABC):
    __slots__ = ()

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError
