__all__ = (
    "InvalidStateError",
    "NotifierError",
)


class NotifierError(Exception): ...


class InvalidStateError(ValueError, NotifierError):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("State is not provided. Ensure a valid state is passed.")
