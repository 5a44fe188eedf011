"""
Configuration for stores.

Load store settings from JSON or YAML files, or build them in code.
"""
from __future__ import annotations

import os
import json
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

REENTRANT_POLICIES = ("queue", "raise")
OBSERVER_ERROR_POLICIES = ("log", "raise")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StoreConfig:
    """
    Settings for a Store.

    Attributes:
        name: Label attached to the store's log records
        reentrant_dispatch: What a dispatch issued during another dispatch
            does: "queue" applies it after the current round, "raise"
            rejects it with ReentrantDispatchError
        observer_errors: "log" logs an observer's exception and keeps
            notifying, "raise" propagates it to the dispatch caller
        log_level: Level passed to configure_logging by the CLI
        log_dir: Directory for log files (None logs to stderr only)
    """
    name: str = "store"
    reentrant_dispatch: str = "queue"
    observer_errors: str = "log"
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    def __post_init__(self) -> None:
        if self.reentrant_dispatch not in REENTRANT_POLICIES:
            raise ValueError(
                f"reentrant_dispatch must be one of {REENTRANT_POLICIES}, "
                f"got {self.reentrant_dispatch!r}"
            )
        if self.observer_errors not in OBSERVER_ERROR_POLICIES:
            raise ValueError(
                f"observer_errors must be one of {OBSERVER_ERROR_POLICIES}, "
                f"got {self.observer_errors!r}"
            )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoreConfig":
        """Create from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def save(self, path: str) -> None:
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str) -> Optional["StoreConfig"]:
        """Load config from JSON or YAML file."""
        if not os.path.exists(path):
            logger.warning(f"Config file not found: {path}")
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()

            if path.endswith((".yaml", ".yml")):
                data = yaml.safe_load(content)
            else:
                data = json.loads(content)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Config in {path} is not a mapping")
            return None

        return cls.from_dict(data)
