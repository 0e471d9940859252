from .listener_helper import ListenerHistory, RecordingListener

__all__ = ("ListenerHistory", "RecordingListener")
