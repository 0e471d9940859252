from ._core.listener import CallbackListener, Listener
from ._core.notifier import Notifier, Subject, Subscription

__all__ = (
    "CallbackListener",
    "Listener",
    "Notifier",
    "Subject",
    "Subscription",
)
