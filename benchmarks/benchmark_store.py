"""
Performance benchmarks for statebox.

Run standalone: python benchmarks/benchmark_store.py
"""
import time
import statistics
from typing import Tuple

# Allow running as standalone script
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from statebox.core.reducer import reduce_actions
from statebox.core.store import Store
from statebox.todos import (
    Todo,
    add_goal_action,
    add_todo_action,
    app,
    toggle_todo_action,
)


def benchmark(fn, iterations: int = 1000) -> Tuple[float, float, float]:
    """
    Benchmark a function.

    Returns:
        (mean_ms, min_ms, max_ms)
    """
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        fn()
        elapsed = (time.perf_counter() - start) * 1000
        times.append(elapsed)

    return (
        statistics.mean(times),
        min(times),
        max(times),
    )


def make_store(n_todos: int = 50) -> Store:
    """Create an app store holding n_todos items."""
    store = Store(app)
    for i in range(n_todos):
        store.dispatch(add_todo_action(Todo(i, f"todo {i}")))
    return store


def benchmark_reduce_single_action():
    """Benchmark the root reducer alone."""
    state = make_store().get_state()
    action = toggle_todo_action(25)

    def run():
        app(state, action)

    mean, min_t, max_t = benchmark(run, iterations=10000)
    print("app reducer (toggle, 50 todos):")
    print(f"  Mean: {mean:.4f}ms  Min: {min_t:.4f}ms  Max: {max_t:.4f}ms")
    return mean


def benchmark_reduce_action_sequence():
    """Benchmark folding a sequence of actions."""
    actions = [
        add_todo_action(Todo(0, "Walk the dog")),
        add_goal_action({"id": 0, "name": "Learn Redux"}),
        toggle_todo_action(0),
    ] * 10  # 30 actions

    def run():
        reduce_actions(app, actions)

    mean, min_t, max_t = benchmark(run, iterations=1000)
    print("reduce_actions (30 actions):")
    print(f"  Mean: {mean:.4f}ms  Min: {min_t:.4f}ms  Max: {max_t:.4f}ms")
    print(f"  Per action: {mean/30:.4f}ms")
    return mean


def benchmark_store_dispatch(n_observers: int):
    """Benchmark Store.dispatch with a number of observers."""
    store = make_store()
    for _ in range(n_observers):
        store.subscribe(lambda: None)
    action = toggle_todo_action(0)

    def run():
        store.dispatch(action)

    mean, min_t, max_t = benchmark(run, iterations=10000)
    print(f"Store.dispatch ({n_observers} observers):")
    print(f"  Mean: {mean:.4f}ms  Min: {min_t:.4f}ms  Max: {max_t:.4f}ms")
    return mean


def run_all_benchmarks():
    """Run all benchmarks."""
    print("=" * 60)
    print("statebox Performance Benchmarks")
    print("=" * 60)
    print()

    results = {}

    results["reduce_single"] = benchmark_reduce_single_action()
    print()

    results["reduce_sequence"] = benchmark_reduce_action_sequence()
    print()

    results["dispatch_0"] = benchmark_store_dispatch(0)
    print()

    results["dispatch_100"] = benchmark_store_dispatch(100)

    print()
    print("=" * 60)
    print("Summary:")
    print(f"  Reductions/sec: {1000 / results['reduce_single']:.0f}")
    print(f"  Dispatches/sec: {1000 / results['dispatch_0']:.0f}")
    print("=" * 60)

    return results


if __name__ == "__main__":
    run_all_benchmarks()
