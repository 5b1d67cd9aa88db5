from .state import SessionListener, SessionState

__all__ = ["SessionListener", "SessionState"]
