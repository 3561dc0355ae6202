"""Tests for the layout mutation policy and the Playground container."""

import pytest
from pydantic import ValidationError

from skeletonne.constraints.redistribution import is_balanced
from skeletonne.dsl.schema import (
    AddSkeleton,
    BorderRadius,
    Orientation,
    PlaygroundState,
    RemoveSkeleton,
    Row,
    SkeletonUpdate,
    Standalone,
    UpdateSkeleton,
    default_state,
)
from skeletonne.engine.ids import SequentialIdFactory, UuidIdFactory, get_id_factory
from skeletonne.engine.layout_policy import (
    add_skeleton,
    reduce,
    remove_skeleton,
    update_skeleton,
)
from skeletonne.engine.playground import Playground
from skeletonne.tests.factories import horizontal, vertical


def assert_rows_balanced(state: PlaygroundState) -> None:
    for row_id in state.row_ids:
        assert is_balanced(state.skeletons, row_id), row_id


# ============================================================================
# Add
# ============================================================================

class TestAddSkeleton:
    """Tests for add_skeleton."""

    def test_add_vertical_appends(self, ids: SequentialIdFactory) -> None:
        state = add_skeleton(default_state(), Orientation.VERTICAL, ids)
        assert len(state.skeletons) == 4
        new = state.skeletons[-1]
        assert new.orientation == Orientation.VERTICAL
        assert new.row_id is None
        assert new.width == "100%"
        assert new.height == "20px"
        assert new.border_radius == BorderRadius.MD
        assert new.color is None

    def test_add_horizontal_to_empty_list(self, ids: SequentialIdFactory) -> None:
        state = add_skeleton(PlaygroundState(), Orientation.HORIZONTAL, ids)
        assert len(state.skeletons) == 1
        only = state.skeletons[0]
        assert only.row_id is not None
        assert only.width == "100.0000%"

    def test_add_horizontal_after_vertical(self, ids: SequentialIdFactory) -> None:
        """The trailing vertical element joins a new row."""
        state = PlaygroundState(skeletons=(vertical("1", width="100%"),))
        result = add_skeleton(state, Orientation.HORIZONTAL, ids)

        assert len(result.skeletons) == 2
        first, second = result.skeletons
        assert first.orientation == Orientation.HORIZONTAL
        assert first.row_id is not None
        assert first.row_id == second.row_id
        assert first.row_id not in state.row_ids
        assert [first.width, second.width] == ["50.0000%", "50.0000%"]

    def test_add_horizontal_joins_last_row(self, three_column_row: PlaygroundState, ids: SequentialIdFactory) -> None:
        result = add_skeleton(three_column_row, Orientation.HORIZONTAL, ids)
        assert len(result.skeletons) == 5
        assert result.skeletons[-1].row_id == "row-a"
        assert [e.width for e in result.skeletons[1:]] == ["25.0000%"] * 4
        assert result.skeletons[0].width == "60%"

    def test_add_horizontal_after_ungrouped_horizontal(self, ids: SequentialIdFactory) -> None:
        state = PlaygroundState(skeletons=(horizontal("solo", None, width="40px"),))
        result = add_skeleton(state, Orientation.HORIZONTAL, ids)
        first, second = result.skeletons
        assert first.row_id is not None
        assert first.row_id == second.row_id
        assert first.width == second.width == "50.0000%"

    def test_add_follows_last_element_not_newest_row(self, ids: SequentialIdFactory) -> None:
        """Test the row of the last list element wins over other rows."""
        state = PlaygroundState(
            skeletons=(
                horizontal("b1", "B", width="100%"),
                horizontal("a1", "A", width="50%"),
                horizontal("a2", "A", width="50%"),
                horizontal("b2", "B", width="100%"),
            )
        )
        result = add_skeleton(state, Orientation.HORIZONTAL, ids)
        assert result.skeletons[-1].row_id == "B"
        assert result.find("a1").width == "50%"

    def test_input_state_unchanged(self, ids: SequentialIdFactory) -> None:
        state = PlaygroundState(skeletons=(vertical("1"),))
        add_skeleton(state, Orientation.HORIZONTAL, ids)
        assert state.skeletons[0].orientation == Orientation.VERTICAL
        assert len(state.skeletons) == 1

    def test_new_ids_do_not_collide(self) -> None:
        state = PlaygroundState(skeletons=(vertical("sk-1"), vertical("sk-2")))
        result = add_skeleton(state, Orientation.VERTICAL, SequentialIdFactory())
        assert result.skeletons[-1].id == "sk-3"

    def test_rows_balanced_after_many_adds(self, ids: SequentialIdFactory) -> None:
        state = PlaygroundState()
        for orientation in ["horizontal", "horizontal", "vertical", "horizontal", "horizontal", "horizontal"]:
            state = add_skeleton(state, Orientation(orientation), ids)
        assert len(state.row_ids) == 2
        assert_rows_balanced(state)


# ============================================================================
# Remove
# ============================================================================

class TestRemoveSkeleton:
    """Tests for remove_skeleton."""

    def test_remove_from_row_redistributes(self, three_column_row: PlaygroundState) -> None:
        """Two survivors get half each."""
        result = remove_skeleton(three_column_row, "b")
        survivors = [e for e in result.skeletons if e.row_id == "row-a"]
        assert [e.id for e in survivors] == ["a", "c"]
        assert [e.width for e in survivors] == ["50.0000%", "50.0000%"]

    def test_remove_last_member_is_noop_for_row(self) -> None:
        state = PlaygroundState(skeletons=(vertical("v"), horizontal("h", "R", width="100.0000%")))
        result = remove_skeleton(state, "h")
        assert [e.id for e in result.skeletons] == ["v"]
        assert result.row_ids == set()

    def test_remove_vertical(self) -> None:
        result = remove_skeleton(default_state(), "2")
        assert [e.id for e in result.skeletons] == ["1", "3"]

    def test_remove_unknown_id(self) -> None:
        state = default_state()
        assert remove_skeleton(state, "nope") is state

    def test_remove_leaves_other_rows_alone(self) -> None:
        state = PlaygroundState(
            skeletons=(
                horizontal("a1", "A", width="50%"),
                horizontal("a2", "A", width="50%"),
                horizontal("b1", "B", width="70%"),
                horizontal("b2", "B", width="30%"),
            )
        )
        result = remove_skeleton(state, "a1")
        assert result.find("a2").width == "100.0000%"
        assert result.find("b1").width == "70%"


# ============================================================================
# Update
# ============================================================================

class TestUpdateSkeleton:
    """Tests for update_skeleton."""

    def test_vertical_to_horizontal(self, ids: SequentialIdFactory) -> None:
        """A new singleton row forced to full width."""
        state = PlaygroundState(skeletons=(vertical("1", width="60%"),))
        result = update_skeleton(state, "1", SkeletonUpdate(orientation=Orientation.HORIZONTAL), ids)
        element = result.skeletons[0]
        assert element.orientation == Orientation.HORIZONTAL
        assert element.row_id is not None
        assert element.width == "100.0000%"

    def test_vertical_to_horizontal_never_joins_neighbors(self, three_column_row: PlaygroundState, ids: SequentialIdFactory) -> None:
        result = update_skeleton(three_column_row, "title", SkeletonUpdate(orientation="horizontal"), ids)
        title = result.find("title")
        assert title.row_id != "row-a"
        assert title.width == "100.0000%"
        assert [result.find(i).width for i in "abc"] == ["33.3333%"] * 3

    def test_horizontal_to_vertical_redistributes_old_row(self, three_column_row: PlaygroundState, ids: SequentialIdFactory) -> None:
        result = update_skeleton(three_column_row, "a", SkeletonUpdate(orientation="vertical"), ids)
        a = result.find("a")
        assert a.orientation == Orientation.VERTICAL
        assert a.row_id is None
        assert a.width == "33.3333%"
        assert result.find("b").width == "50.0000%"
        assert result.find("c").width == "50.0000%"

    def test_horizontal_to_vertical_last_member(self, ids: SequentialIdFactory) -> None:
        state = PlaygroundState(skeletons=(horizontal("h", "R", width="100.0000%"),))
        result = update_skeleton(state, "h", SkeletonUpdate(orientation="vertical"), ids)
        assert result.skeletons[0].row_id is None
        assert result.row_ids == set()

    def test_raw_width_edit_has_no_side_effects(self, three_column_row: PlaygroundState, ids: SequentialIdFactory) -> None:
        """Test a raw width edit may leave the row unbalanced."""
        result = update_skeleton(three_column_row, "a", SkeletonUpdate(width="50%"), ids)
        assert result.find("a").width == "50%"
        assert result.find("b").width == "33.3333%"
        assert not is_balanced(result.skeletons, "row-a")

    def test_next_structural_change_rebalances(self, three_column_row: PlaygroundState, ids: SequentialIdFactory) -> None:
        edited = update_skeleton(three_column_row, "a", SkeletonUpdate(width="50%"), ids)
        result = add_skeleton(edited, Orientation.HORIZONTAL, ids)
        assert_rows_balanced(result)

    def test_style_fields_merge(self, ids: SequentialIdFactory) -> None:
        state = default_state()
        result = update_skeleton(
            state,
            "2",
            SkeletonUpdate(height="48px", border_radius="full", color="#E5E7EB"),
            ids,
        )
        element = result.find("2")
        assert element.height == "48px"
        assert element.border_radius == BorderRadius.FULL
        assert element.color == "#E5E7EB"
        assert element.width == "80%"

    def test_clear_color(self, ids: SequentialIdFactory) -> None:
        state = PlaygroundState(skeletons=(vertical("1", color="#000000"),))
        result = update_skeleton(state, "1", SkeletonUpdate(clear_color=True), ids)
        assert result.skeletons[0].color is None

    def test_unchanged_orientation_is_plain_merge(self, three_column_row: PlaygroundState, ids: SequentialIdFactory) -> None:
        result = update_skeleton(
            three_column_row, "b", SkeletonUpdate(orientation="horizontal", height="8px"), ids
        )
        assert result.find("b").row_id == "row-a"
        assert result.find("b").height == "8px"

    def test_orientation_change_with_other_fields(self, ids: SequentialIdFactory) -> None:
        state = PlaygroundState(skeletons=(vertical("1"),))
        result = update_skeleton(
            state, "1", SkeletonUpdate(orientation="horizontal", width="30%", height="40px"), ids
        )
        element = result.skeletons[0]
        assert element.height == "40px"
        assert element.width == "100.0000%"

    def test_update_unknown_id(self, ids: SequentialIdFactory) -> None:
        state = default_state()
        assert update_skeleton(state, "ghost", SkeletonUpdate(width="10%"), ids) is state

    def test_row_id_cannot_be_updated(self) -> None:
        update = SkeletonUpdate.model_validate({"width": "10%", "row_id": "hijack"})
        assert "row_id" not in update.changes()


# ============================================================================
# Reducer & container
# ============================================================================

class TestReduce:
    """Tests for the reducer entry point."""

    def test_dispatches_each_action(self, ids: SequentialIdFactory) -> None:
        state = default_state()
        state = reduce(state, AddSkeleton(orientation="horizontal"), ids)
        assert len(state.skeletons) == 4
        state = reduce(state, RemoveSkeleton(id="1"), ids)
        assert len(state.skeletons) == 3
        state = reduce(state, UpdateSkeleton(id="2", updates=SkeletonUpdate(width="75%")), ids)
        assert state.find("2").width == "75%"

    def test_unknown_action_type(self, ids: SequentialIdFactory) -> None:
        with pytest.raises(TypeError):
            reduce(default_state(), object(), ids)


class TestPlayground:
    """Tests for the Playground state container."""

    def test_starts_with_default_state(self) -> None:
        playground = Playground()
        assert [e.width for e in playground.state.skeletons] == ["100%", "80%", "60%"]

    def test_snapshots_are_replaced(self) -> None:
        playground = Playground()
        before = playground.state
        after = playground.add(Orientation.HORIZONTAL)
        assert before is not after
        assert len(before.skeletons) == 3
        assert playground.state is after

    def test_session_flow_keeps_rows_balanced(self) -> None:
        playground = Playground(PlaygroundState())
        playground.add(Orientation.VERTICAL)
        playground.add(Orientation.HORIZONTAL)
        playground.add(Orientation.HORIZONTAL)
        playground.add(Orientation.HORIZONTAL)
        assert_rows_balanced(playground.state)

        row_member = next(e for e in playground.state.skeletons if e.is_horizontal)
        playground.remove(row_member.id)
        assert_rows_balanced(playground.state)

        playground.update(playground.state.skeletons[-1].id, orientation="vertical")
        assert_rows_balanced(playground.state)

    def test_units(self) -> None:
        playground = Playground()
        assert len(playground.units()) == 3

    def test_units_are_render_units(self) -> None:
        playground = Playground()
        playground.add(Orientation.HORIZONTAL)
        units = playground.units()
        assert isinstance(units, list)
        assert [type(u) for u in units] == [Standalone, Standalone, Row]


class TestIdFactories:
    """Tests for id factories."""

    def test_sequential(self) -> None:
        ids = SequentialIdFactory()
        assert ids.element_id() == "sk-1"
        assert ids.element_id() == "sk-2"
        assert ids.row_id() == "row-1"

    def test_sequential_skips_taken(self) -> None:
        ids = SequentialIdFactory()
        assert ids.row_id({"row-1", "row-2"}) == "row-3"

    def test_uuid_unique(self) -> None:
        ids = UuidIdFactory()
        generated = {ids.element_id() for _ in range(200)}
        assert len(generated) == 200
        assert all(i.startswith("sk-") for i in generated)

    def test_get_id_factory(self) -> None:
        assert isinstance(get_id_factory("uuid"), UuidIdFactory)
        assert isinstance(get_id_factory("sequential"), SequentialIdFactory)
        with pytest.raises(ValueError):
            get_id_factory("clock")


class TestStateValidation:
    """Invariants enforced when a snapshot is built."""

    def test_vertical_with_row_rejected(self) -> None:
        with pytest.raises(ValidationError):
            vertical("1", row_id="row-1")

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PlaygroundState(skeletons=(vertical("1"), vertical("1")))
