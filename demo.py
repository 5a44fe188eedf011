#!/usr/bin/env python3
"""
statebox Demo Script

This script walks through the store's behaviour:
1. Dispatch - a root reducer built from two region reducers
2. Subscriptions - multiple registrations and unsubscribe
3. Nested dispatch - actions dispatched by an observer are queued

Run with:
    python demo.py
"""
from statebox import Action, Store, StoreConfig, ReentrantDispatchError
from statebox.todos import (
    DEMO_ACTIONS,
    app,
    remove_goal_action,
    state_to_dict,
)


def print_header(text: str):
    """Print a styled header."""
    print(f"\n{'='*60}")
    print(f"  {text}")
    print(f"{'='*60}\n")


def demo_dispatch():
    """Replay the to-do/goal session."""
    print_header("Demo 1: Dispatching Actions")

    store = Store(app)
    store.subscribe(lambda: print(f"  The new state is: {state_to_dict(store.get_state())}"))

    for action in DEMO_ACTIONS:
        print(f"\n▶ {action.type} {dict(action.payload)}")
        store.dispatch(action)


def demo_subscriptions():
    """Show that each registration is revoked on its own."""
    print_header("Demo 2: Subscriptions")

    store = Store(app)
    calls = []

    def observer():
        calls.append(store.dispatch_count)

    first = store.subscribe(observer)
    second = store.subscribe(observer)

    store.dispatch(remove_goal_action(0))
    print(f"  Same observer registered twice -> {len(calls)} calls")

    first()
    store.dispatch(remove_goal_action(0))
    print(f"  After first unsubscribe -> {len(calls)} calls total")

    second()
    second()
    store.dispatch(remove_goal_action(0))
    print(f"  After second unsubscribe (twice) -> {len(calls)} calls total")


def demo_nested_dispatch():
    """Compare the queue and raise policies for nested dispatch."""
    print_header("Demo 3: Nested Dispatch")

    def log_reducer(state, action):
        return (state or ()) + (action.type,)

    store = Store(log_reducer)

    def chain():
        if store.get_state()[-1] == "FIRST":
            store.dispatch(Action("FOLLOW_UP"))

    store.subscribe(chain)
    store.dispatch(Action("FIRST"))
    print(f"  queue policy -> {store.get_state()}")

    strict = Store(log_reducer, StoreConfig(name="strict", reentrant_dispatch="raise"))

    def strict_chain():
        try:
            strict.dispatch(Action("FOLLOW_UP"))
        except ReentrantDispatchError as e:
            print(f"  raise policy -> {e}")

    strict.subscribe(strict_chain)
    strict.dispatch(Action("FIRST"))


def main():
    """Run all demos."""
    demo_dispatch()
    demo_subscriptions()
    demo_nested_dispatch()

    print_header("Demo Complete!")
    print("To run the scripted session from the command line:")
    print("  python -m statebox --json")
    print()


if __name__ == "__main__":
    main()
