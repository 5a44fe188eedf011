# Observable state container
from .actions import Action
from .reducer import action_type, combine_reducers, create_reducer, reduce_actions
from .store import ReentrantDispatchError, Store, StoreError, create_store

__all__ = [
    "Action",
    "action_type",
    "combine_reducers",
    "create_reducer",
    "reduce_actions",
    "ReentrantDispatchError",
    "Store",
    "StoreError",
    "create_store",
]
