from __future__ import annotations

import argparse
import json
from typing import List, Optional

from .config import LOG_LEVELS, StoreConfig
from .core.store import Store
from .logging_config import configure_logging, get_logger
from .todos import DEMO_ACTIONS, app, state_to_dict


def _render(state, as_json: bool) -> str:
    data = state_to_dict(state)
    if as_json:
        return json.dumps(data)
    return f"The new state is: {data}"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="statebox demo - replay the to-do/goal session through a store"
    )
    ap.add_argument("--config", help="Store config file (JSON or YAML)")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                    help="Log level (overrides config)")
    ap.add_argument("--log-dir", help="Directory for log files (overrides config)")
    ap.add_argument("--json", action="store_true", help="Print states as JSON")
    ap.add_argument("--quiet", action="store_true", help="Print only the final state")

    args = ap.parse_args(argv)

    config = StoreConfig(name="demo")
    if args.config:
        try:
            loaded = StoreConfig.load(args.config)
        except ValueError as e:
            ap.error(f"invalid config {args.config}: {e}")
        if loaded is None:
            ap.error(f"could not load config: {args.config}")
        config = loaded

    configure_logging(
        level=args.log_level or config.log_level,
        log_dir=args.log_dir or config.log_dir,
    )
    log = get_logger("statebox.demo")

    store = Store(app, config)

    unsubscribe = None
    if not args.quiet:
        unsubscribe = store.subscribe(lambda: print(_render(store.get_state(), args.json)))

    for action in DEMO_ACTIONS:
        store.dispatch(action)
        log.event(action.type, "Dispatched", store=store.name, seq=store.dispatch_count)

    if unsubscribe:
        unsubscribe()

    if args.quiet:
        print(_render(store.get_state(), args.json))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
