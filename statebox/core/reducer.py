"""
Reducer helpers.

A reducer is a pure function ``(state, action) -> state``. The store holds
exactly one; these helpers build that one reducer out of smaller pieces:

- create_reducer: dispatch table keyed by action type, O(1) lookup
- combine_reducers: fan-out over independent named regions of state
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

Reducer = Callable[[Optional[Any], Any], Any]
Handler = Callable[[Any, Any], Any]


def action_type(action: Any) -> Optional[str]:
    """Return the discriminant of an action, or None if it carries none."""
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


def create_reducer(
    handlers: Mapping[str, Handler],
    default: Any = None,
) -> Reducer:
    """
    Build a reducer from a dispatch table.

    Args:
        handlers: Maps action type to ``handler(state, action) -> state``
        default: Initial state, or a zero-argument factory for it, used
            when the reducer is handed an absent state

    Returns:
        Reducer that returns the state unchanged for unknown action types
    """
    table: Dict[str, Handler] = dict(handlers)
    for key, handler in table.items():
        if not callable(handler):
            raise TypeError(f"Handler for {key!r} is not callable")

    def reducer(state: Any, action: Any) -> Any:
        if state is None:
            state = default() if callable(default) else default

        handler = table.get(action_type(action))
        if handler is None:
            logger.debug(f"No handler for action type: {action_type(action)}")
            return state

        return handler(state, action)

    return reducer


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """
    Compose one reducer per named region into a single reducer.

    Every action goes to every region reducer together with that region's
    previous sub-state (None on the first call). The result is a new dict
    keyed by region name. Regions never see each other's values, so a region
    cannot react to another region's new value within the same action.
    """
    if not reducers:
        raise ValueError("combine_reducers needs at least one region")

    regions = dict(reducers)
    for name, fn in regions.items():
        if not callable(fn):
            raise TypeError(f"Reducer for region {name!r} is not callable")

    def combined(state: Optional[Mapping[str, Any]], action: Any) -> Dict[str, Any]:
        previous = state if state is not None else {}
        return {
            name: fn(previous.get(name), action)
            for name, fn in regions.items()
        }

    return combined


def reduce_actions(
    reducer: Callable[[Optional[S], Any], S],
    actions: Iterable[Any],
    state: Optional[S] = None,
) -> Optional[S]:
    """Apply a sequence of actions to get the final state."""
    for action in actions:
        state = reducer(state, action)
    return state
