"""
Observable state store.

The store is the single writer for its state.
All writes go through dispatch(), all reads through get_state().

Each dispatch:
- Runs the reducer on (current state, action)
- Replaces the state with the result
- Calls every observer registered when notification began, in order

A dispatch issued while another is in progress (from an observer or from
the reducer itself) is queued and applied after the current round, or
rejected, depending on StoreConfig.reentrant_dispatch.
"""
from __future__ import annotations

import itertools
import logging
import threading
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional

from .reducer import action_type
from ..config import StoreConfig

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


class StoreError(Exception):
    """Base class for store errors."""
    pass


class ReentrantDispatchError(StoreError):
    """Raised when dispatch is called during dispatch and the policy is "raise"."""
    pass


class Store:
    """
    Holds one state value, replaced by a reducer on every dispatch.

    The state starts absent (None); the reducer supplies its own default
    on the first dispatch. get_state() returns the stored object itself,
    so callers must treat it as read-only.

    Thread-safe: dispatch, subscribe, unsubscribe and get_state share one
    re-entrant lock, held for the whole dispatch including notification.

    Example:
        >>> store = Store(app)
        >>> unsubscribe = store.subscribe(lambda: print(store.get_state()))
        >>> store.dispatch(add_todo_action(todo))
        >>> unsubscribe()
    """

    def __init__(
        self,
        reducer: Callable[[Any, Any], Any],
        config: Optional[StoreConfig] = None,
    ):
        """
        Initialize the store.

        Args:
            reducer: Pure function (state, action) -> state. Receives None
                as state on the first dispatch.
            config: Store settings (defaults to StoreConfig())
        """
        if not callable(reducer):
            raise TypeError(f"reducer must be callable, got {type(reducer).__name__}")

        self._reducer = reducer
        self._config = config or StoreConfig()
        self._state: Any = None
        self._lock = threading.RLock()
        self._seq = 0

        # Registrations keyed by token; dict order is registration order
        self._observers: Dict[int, Observer] = {}
        self._tokens = itertools.count(1)

        self._dispatching = False
        self._pending: Deque[Any] = deque()

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def observer_count(self) -> int:
        """Number of live registrations."""
        with self._lock:
            return len(self._observers)

    @property
    def dispatch_count(self) -> int:
        """Number of actions applied so far."""
        with self._lock:
            return self._seq

    def get_state(self) -> Any:
        """Return the current state (None before the first dispatch)."""
        with self._lock:
            return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer for state changes.

        The same callable may be registered more than once; every
        registration gets its own unsubscribe function.

        Args:
            observer: Called with no arguments after each dispatch

        Returns:
            Unsubscribe function for this registration. Calling it more
            than once is a no-op.
        """
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")

        with self._lock:
            token = next(self._tokens)
            self._observers[token] = observer

        def unsubscribe() -> None:
            with self._lock:
                if self._observers.pop(token, None) is None:
                    logger.debug(f"Observer {token} already unsubscribed")

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """
        Apply an action to the state and notify observers.

        This is the ONLY way to change state.

        Args:
            action: Passed to the reducer untouched

        Returns:
            The action, for chaining

        Raises:
            ReentrantDispatchError: Called during another dispatch with
                reentrant_dispatch="raise"
            Exception: Anything the reducer raises propagates unchanged;
                the state keeps its previous value
        """
        with self._lock:
            if self._dispatching:
                return self._dispatch_nested(action)

            self._dispatching = True
            try:
                self._apply(action)
                while self._pending:
                    self._apply(self._pending.popleft())
            finally:
                self._dispatching = False
                if self._pending:
                    logger.warning(
                        f"Discarding {len(self._pending)} queued actions after failed dispatch",
                        extra={"store": self.name},
                    )
                    self._pending.clear()

            return action

    def _dispatch_nested(self, action: Any) -> Any:
        """Handle a dispatch issued while another is running (lock held)."""
        if self._config.reentrant_dispatch == "raise":
            raise ReentrantDispatchError(
                f"Store {self.name!r} is already dispatching; "
                f"cannot dispatch {action_type(action)!r}"
            )

        self._pending.append(action)
        logger.debug(
            f"Queued nested action: {action_type(action)}",
            extra={"store": self.name, "action_type": action_type(action)},
        )
        return action

    def _apply(self, action: Any) -> None:
        """Run the reducer and notify observers (lock held)."""
        start = time.perf_counter()

        new_state = self._reducer(self._state, action)
        self._state = new_state
        self._seq += 1
        seq = self._seq

        self._notify(action, seq)

        logger.debug(
            f"Applied action: {action_type(action)} seq={seq}",
            extra={
                "store": self.name,
                "seq": seq,
                "action_type": action_type(action),
                "latency_ms": (time.perf_counter() - start) * 1000,
            },
        )

    def _notify(self, action: Any, seq: int) -> None:
        """Call observers registered when notification begins (lock held)."""
        for token, observer in list(self._observers.items()):
            # Removed by an earlier observer in this round
            if token not in self._observers:
                continue
            try:
                observer()
            except Exception:
                if self._config.observer_errors == "raise":
                    raise
                logger.exception(
                    f"Observer error after action {action_type(action)}",
                    extra={
                        "store": self.name,
                        "seq": seq,
                        "action_type": action_type(action),
                    },
                )

    def __repr__(self) -> str:
        return (
            f"Store(name={self.name!r}, dispatches={self._seq}, "
            f"observers={len(self._observers)})"
        )


def create_store(
    reducer: Callable[[Any, Any], Any],
    config: Optional[StoreConfig] = None,
) -> Store:
    """Create a store for a reducer."""
    return Store(reducer, config)
