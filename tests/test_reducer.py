"""
Tests for reducer helpers: dispatch tables and region composition.
"""
import pytest

from statebox.core.actions import Action
from statebox.core.reducer import (
    action_type,
    combine_reducers,
    create_reducer,
    reduce_actions,
)


def append_handler(state, action):
    return state + [action["item"]]


class TestActionType:
    """Test discriminant lookup."""

    def test_action_object(self):
        assert action_type(Action("ADD")) == "ADD"

    def test_mapping(self):
        assert action_type({"type": "ADD", "item": 1}) == "ADD"

    def test_missing_discriminant(self):
        assert action_type({"item": 1}) is None
        assert action_type(42) is None
        assert action_type(None) is None


class TestCreateReducer:
    """Test dispatch-table reducers."""

    def test_default_factory_on_absent_state(self):
        """Absent state becomes a fresh default from the factory."""
        reducer = create_reducer({"ADD": append_handler}, default=list)

        first = reducer(None, Action("NOOP"))
        second = reducer(None, Action("NOOP"))

        assert first == []
        assert first is not second

    def test_default_value(self):
        """A non-callable default is used as is."""
        reducer = create_reducer({}, default=0)
        assert reducer(None, Action("ANY")) == 0

    def test_handler_called(self):
        """Known action types go to their handler."""
        reducer = create_reducer({"ADD": append_handler}, default=list)
        assert reducer([1], Action("ADD", {"item": 2})) == [1, 2]

    def test_mapping_actions_supported(self):
        """Plain mappings with a type key are dispatched like Actions."""
        reducer = create_reducer({"ADD": append_handler}, default=list)
        assert reducer(None, {"type": "ADD", "item": "x"}) == ["x"]

    def test_unknown_action_is_identity(self):
        """Unknown action types return the very same state object."""
        reducer = create_reducer({"ADD": append_handler}, default=list)
        state = [1, 2]
        assert reducer(state, Action("UNKNOWN")) is state
        assert reducer(state, {"no_type": True}) is state

    def test_handler_does_not_mutate_input(self):
        """Handlers build new state rather than mutating the old one."""
        reducer = create_reducer({"ADD": append_handler}, default=list)
        state = [1]
        reducer(state, Action("ADD", {"item": 2}))
        assert state == [1]

    def test_non_callable_handler_rejected(self):
        with pytest.raises(TypeError):
            create_reducer({"ADD": "nope"})


class TestCombineReducers:
    """Test fan-out composition over named regions."""

    @pytest.fixture
    def combined(self):
        left = create_reducer({"LEFT": append_handler}, default=list)
        right = create_reducer({"RIGHT": append_handler}, default=list)
        return combine_reducers({"left": left, "right": right})

    def test_absent_state_builds_every_region(self, combined):
        """First call gives each region its own default."""
        assert combined(None, Action("NOOP")) == {"left": [], "right": []}

    def test_action_for_one_region_leaves_other_untouched(self, combined):
        """The other region's sub-state is the same object after the action."""
        state = combined(None, Action("NOOP"))
        right_before = state["right"]

        new_state = combined(state, Action("LEFT", {"item": 1}))

        assert new_state["left"] == [1]
        assert new_state["right"] is right_before

    def test_returns_new_record(self, combined):
        """The composed reducer never mutates the incoming record."""
        state = combined(None, Action("NOOP"))
        new_state = combined(state, Action("LEFT", {"item": 1}))

        assert new_state is not state
        assert state == {"left": [], "right": []}

    def test_every_region_sees_full_action(self):
        """Each region reducer receives the whole action."""
        seen = {}

        def recorder(name):
            def reducer(state, action):
                seen[name] = action
                return state
            return reducer

        combined = combine_reducers({"a": recorder("a"), "b": recorder("b")})
        action = Action("X", {"k": 1})
        combined(None, action)

        assert seen == {"a": action, "b": action}

    def test_regions_get_absent_substate_when_missing(self):
        """Regions missing from the previous record get None."""
        seen = []

        def reducer(state, action):
            seen.append(state)
            return 0 if state is None else state

        combined = combine_reducers({"a": reducer, "b": reducer})
        combined({"a": 5}, Action("X"))

        assert seen == [5, None]

    def test_region_order_preserved(self, combined):
        state = combined(None, Action("NOOP"))
        assert list(state) == ["left", "right"]

    def test_empty_mapping_rejected(self):
        with pytest.raises(ValueError):
            combine_reducers({})

    def test_non_callable_region_rejected(self):
        with pytest.raises(TypeError):
            combine_reducers({"a": None})


class TestReduceActions:
    """Test the fold helper."""

    def test_empty_sequence_returns_initial(self):
        assert reduce_actions(lambda s, a: s + a, [], 3) == 3
        assert reduce_actions(lambda s, a: a, []) is None

    def test_fold_order(self):
        reducer = lambda s, a: (s or "") + a  # noqa: E731
        assert reduce_actions(reducer, ["a", "b", "c"]) == "abc"
