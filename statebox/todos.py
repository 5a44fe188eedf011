"""
Example domain: to-do items and goals.

Two independent regions of state, each with its own reducer, combined into
one root reducer (``app``) for a single store:

    {"todos": (Todo, ...), "goals": (Goal, ...)}
"""
from __future__ import annotations

from dataclasses import dataclass, replace, asdict
from typing import Any, Dict, List, Mapping, Tuple, Union

from .core.actions import Action
from .core.reducer import combine_reducers, create_reducer

ADD_TODO = "ADD_TODO"
REMOVE_TODO = "REMOVE_TODO"
TOGGLE_TODO = "TOGGLE_TODO"
ADD_GOAL = "ADD_GOAL"
REMOVE_GOAL = "REMOVE_GOAL"


@dataclass(frozen=True)
class Todo:
    id: int
    name: str
    complete: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Todo":
        return cls(id=data["id"], name=data["name"], complete=data.get("complete", False))


@dataclass(frozen=True)
class Goal:
    id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Goal":
        return cls(id=data["id"], name=data["name"])


# Action creators

def add_todo_action(todo: Union[Todo, Mapping[str, Any]]) -> Action:
    """Create an action adding a to-do item."""
    if not isinstance(todo, Todo):
        todo = Todo.from_dict(todo)
    return Action(ADD_TODO, {"todo": todo})


def remove_todo_action(id: int) -> Action:
    """Create an action removing the to-do item with this id."""
    return Action(REMOVE_TODO, {"id": id})


def toggle_todo_action(id: int) -> Action:
    """Create an action flipping ``complete`` on the to-do item with this id."""
    return Action(TOGGLE_TODO, {"id": id})


def add_goal_action(goal: Union[Goal, Mapping[str, Any]]) -> Action:
    """Create an action adding a goal."""
    if not isinstance(goal, Goal):
        goal = Goal.from_dict(goal)
    return Action(ADD_GOAL, {"goal": goal})


def remove_goal_action(id: int) -> Action:
    """Create an action removing the goal with this id."""
    return Action(REMOVE_GOAL, {"id": id})


# Region reducers

def _add_todo(state: Tuple[Todo, ...], action: Action) -> Tuple[Todo, ...]:
    return state + (action["todo"],)


def _remove_todo(state: Tuple[Todo, ...], action: Action) -> Tuple[Todo, ...]:
    return tuple(todo for todo in state if todo.id != action["id"])


def _toggle_todo(state: Tuple[Todo, ...], action: Action) -> Tuple[Todo, ...]:
    return tuple(
        replace(todo, complete=not todo.complete) if todo.id == action["id"] else todo
        for todo in state
    )


def _add_goal(state: Tuple[Goal, ...], action: Action) -> Tuple[Goal, ...]:
    return state + (action["goal"],)


def _remove_goal(state: Tuple[Goal, ...], action: Action) -> Tuple[Goal, ...]:
    return tuple(goal for goal in state if goal.id != action["id"])


todos = create_reducer(
    {
        ADD_TODO: _add_todo,
        REMOVE_TODO: _remove_todo,
        TOGGLE_TODO: _toggle_todo,
    },
    default=tuple,
)

goals = create_reducer(
    {
        ADD_GOAL: _add_goal,
        REMOVE_GOAL: _remove_goal,
    },
    default=tuple,
)

# Root reducer for a single store
app = combine_reducers({"todos": todos, "goals": goals})


def state_to_dict(state: Mapping[str, Tuple[Any, ...]]) -> Dict[str, List[Dict[str, Any]]]:
    """Convert app state to plain lists of dicts for printing/JSON."""
    return {
        region: [item.to_dict() for item in items]
        for region, items in state.items()
    }


# The original scripted session
DEMO_ACTIONS: List[Action] = [
    add_todo_action(Todo(0, "Walk the dog", False)),
    add_todo_action(Todo(1, "Wash the car", False)),
    add_todo_action(Todo(2, "Go to the gym", True)),
    remove_todo_action(1),
    toggle_todo_action(0),
    add_goal_action(Goal(0, "Learn Redux")),
    add_goal_action(Goal(1, "Lose 20 pounds")),
    remove_goal_action(0),
]
