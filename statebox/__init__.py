"""
statebox - a minimal observable state container.

One state value, replaced by a reducer on every dispatched action, with
synchronous change notification to subscribed observers.
"""
from .config import StoreConfig
from .core import (
    Action,
    ReentrantDispatchError,
    Store,
    StoreError,
    action_type,
    combine_reducers,
    create_reducer,
    create_store,
    reduce_actions,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ReentrantDispatchError",
    "Store",
    "StoreConfig",
    "StoreError",
    "action_type",
    "combine_reducers",
    "create_reducer",
    "create_store",
    "reduce_actions",
]
