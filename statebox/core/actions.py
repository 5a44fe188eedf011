"""
Action values for the store.

An action is a request to change state. It is:
- Immutable (frozen dataclass)
- Tagged with a discriminant (``type``)
- Carrying whatever payload the change needs

The store never looks inside an action; only reducers do.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Action:
    """
    Immutable request to change state.

    The payload is copied into a read-only mapping. Actions hash by type
    and payload keys, so payload values need not be hashable.

    Attributes:
        type: Discriminant used by reducers to pick a handler
        payload: Action-specific data
    """
    type: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def __hash__(self) -> int:
        return hash((self.type, frozenset(self.payload)))

    def get(self, key: str, default: Any = None) -> Any:
        """Read a payload field."""
        return self.payload.get(key, default)

    def __getitem__(self, key: str) -> Any:
        if key == "type":
            return self.type
        return self.payload[key]

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to ``{"type": ..., **payload}``."""
        data = {"type": self.type}
        data.update(self.payload)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Action":
        """Build from a flat mapping with a ``type`` key."""
        if "type" not in data:
            raise ValueError("Action mapping needs a 'type' key")
        payload = {k: v for k, v in data.items() if k != "type"}
        return cls(type=data["type"], payload=payload)
