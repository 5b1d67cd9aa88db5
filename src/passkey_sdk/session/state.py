from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

SessionListener = Callable[[str], None]


class SessionState:
    """Who is signed in, plus the listeners told about every change.

    Listeners receive the new username, or an empty string on sign-out. They
    run synchronously, in subscription order. A listener that raises is logged
    and does not stop the others or undo the state change.
    """

    def __init__(self) -> None:
        self._current_user: str | None = None
        self._listeners: list[SessionListener] = []

    @property
    def current_user(self) -> str | None:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return bool(self._current_user)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, username: str) -> None:
        self._current_user = username
        self._notify(username)

    def sign_out(self) -> None:
        self._current_user = None
        self._notify("")

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _notify(self, value: str) -> None:
        logger.debug(f"Session changed: {value!r} ({len(self._listeners)} listeners)")
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception as e:
                logger.error(f"Session listener {listener!r} failed: {e}", exc_info=True)
