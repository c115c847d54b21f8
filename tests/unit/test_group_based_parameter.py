"""Unit tests for group-based parameters.

Tests:
- Component count
- Cell and node lookup
- Missing group data
- Time independence
- Live view of the group ID property
- Validation
"""

from __future__ import annotations

import threading

import numpy as np
import pytest

from pyhydroparam.core.exceptions import GroupDataError, ParameterError
from pyhydroparam.core.mesh import Mesh, MeshItemType, PropertyVector
from pyhydroparam.core.spatial_position import SpatialPosition
from pyhydroparam.parameters.group_based import GroupBasedParameter


def make_parameter(
    index: list[int],
    values: list[list[float]],
    item_type: MeshItemType = MeshItemType.CELL,
    mesh: Mesh | None = None,
) -> GroupBasedParameter:
    prop = PropertyVector("MaterialIDs", item_type, np.array(index, dtype=np.int64))
    return GroupBasedParameter("p", mesh, prop, values, item_type)


# =============================================================================
# Test component count
# =============================================================================


class TestNumberOfComponents:
    """Tests for n_components."""

    @pytest.mark.parametrize("width", [1, 2, 3, 6])
    def test_equals_row_width(self, width: int) -> None:
        rows = [[float(i)] * width for i in range(4)]
        param = make_parameter([0, 1, 2, 3], rows)
        assert param.n_components == width

    def test_empty_table(self) -> None:
        param = make_parameter([0], [])
        assert param.n_components == 0
        assert param.n_groups == 0

    def test_ragged_table_rejected(self) -> None:
        with pytest.raises(ParameterError, match="differing numbers of components"):
            make_parameter([0, 1], [[1.0], [1.0, 2.0]])

    def test_empty_rows_ignored_in_width_check(self) -> None:
        param = make_parameter([0, 2], [[1.0, 2.0], [], [3.0, 4.0]])
        assert param.n_components == 2


# =============================================================================
# Test evaluation
# =============================================================================


class TestEvaluate:
    """Tests for evaluate()."""

    def test_single_cell(self) -> None:
        param = make_parameter([0], [[3.5]], MeshItemType.CELL)
        result = param.evaluate(0.0, SpatialPosition(element_id=0))
        np.testing.assert_array_equal(result, [3.5])

    def test_nodes(self) -> None:
        param = make_parameter([0, 1], [[1.0, 2.0], [3.0, 4.0]], MeshItemType.NODE)

        np.testing.assert_array_equal(param.evaluate(0.0, SpatialPosition(node_id=1)), [3.0, 4.0])
        np.testing.assert_array_equal(param.evaluate(0.0, SpatialPosition(node_id=0)), [1.0, 2.0])

    def test_cell_parameter_ignores_node_id(self) -> None:
        param = make_parameter([1, 0], [[10.0], [20.0]], MeshItemType.CELL)
        result = param.evaluate(0.0, SpatialPosition(node_id=0, element_id=1))
        np.testing.assert_array_equal(result, [10.0])

    def test_node_parameter_ignores_element_id(self) -> None:
        param = make_parameter([1, 0], [[10.0], [20.0]], MeshItemType.NODE)
        result = param.evaluate(0.0, SpatialPosition(node_id=0, element_id=1))
        np.testing.assert_array_equal(result, [20.0])

    def test_call_alias(self) -> None:
        param = make_parameter([0], [[3.5]])
        np.testing.assert_array_equal(param(0.0, SpatialPosition(element_id=0)), [3.5])

    def test_missing_element_id_asserts(self) -> None:
        param = make_parameter([0], [[3.5]], MeshItemType.CELL)
        with pytest.raises(AssertionError):
            param.evaluate(0.0, SpatialPosition(node_id=0))

    def test_missing_node_id_asserts(self) -> None:
        param = make_parameter([0], [[3.5]], MeshItemType.NODE)
        with pytest.raises(AssertionError):
            param.evaluate(0.0, SpatialPosition(element_id=0))

    def test_empty_group_raises(self) -> None:
        param = make_parameter([0, 1], [[1.0], []])

        with pytest.raises(GroupDataError, match="No data found for the group index 1") as exc_info:
            param.evaluate(0.0, SpatialPosition(element_id=1))

        assert exc_info.value.group_index == 1
        assert exc_info.value.parameter_name == "p"

    def test_group_out_of_range_raises_index_error(self) -> None:
        param = make_parameter([0, 5], [[1.0]])
        with pytest.raises(IndexError):
            param.evaluate(0.0, SpatialPosition(element_id=1))

    def test_item_out_of_range_raises_index_error(self) -> None:
        param = make_parameter([0], [[1.0]])
        with pytest.raises(IndexError):
            param.evaluate(0.0, SpatialPosition(element_id=3))

    def test_result_is_a_copy(self) -> None:
        param = make_parameter([0], [[3.5]])
        pos = SpatialPosition(element_id=0)

        result = param.evaluate(0.0, pos)
        result[0] = -1.0

        np.testing.assert_array_equal(param.evaluate(0.0, pos), [3.5])

    def test_input_rows_copied(self) -> None:
        rows = [[1.0, 2.0]]
        param = make_parameter([0], rows)
        rows[0][0] = 99.0

        np.testing.assert_array_equal(param.evaluate(0.0, SpatialPosition(element_id=0)), [1.0, 2.0])

    def test_repeated_queries_identical(self) -> None:
        param = make_parameter([0, 1, 1], [[1.0, 2.0], [3.0, 4.0]])
        pos = SpatialPosition(element_id=2)

        first = param.evaluate(0.0, pos)
        second = param.evaluate(0.0, pos)

        np.testing.assert_array_equal(first, second)


# =============================================================================
# Test time independence
# =============================================================================


class TestTimeIndependence:
    """Tests for is_time_dependent and the ignored time argument."""

    def test_not_time_dependent(self) -> None:
        assert make_parameter([0], [[1.0]]).is_time_dependent is False

    @pytest.mark.parametrize("t", [-1.0, 0.0, 3600.0, 1e12])
    def test_time_ignored(self, t: float) -> None:
        param = make_parameter([0, 1], [[1.0, 2.0], [3.0, 4.0]], MeshItemType.NODE)
        pos = SpatialPosition(node_id=1)

        np.testing.assert_array_equal(param.evaluate(t, pos), param.evaluate(0.0, pos))


# =============================================================================
# Test live group ID property
# =============================================================================


class TestBorrowedIndexTable:
    """The group ID property is referenced, not copied."""

    def test_same_property_object(self) -> None:
        prop = PropertyVector("ids", MeshItemType.CELL, np.array([0]))
        param = GroupBasedParameter("p", None, prop, [[1.0]], MeshItemType.CELL)
        assert param.property_index is prop

    def test_mutation_observed(self) -> None:
        ids = np.array([0, 0], dtype=np.int64)
        prop = PropertyVector("ids", MeshItemType.CELL, ids)
        param = GroupBasedParameter("p", None, prop, [[1.0], [2.0]], MeshItemType.CELL)
        pos = SpatialPosition(element_id=1)

        np.testing.assert_array_equal(param.evaluate(0.0, pos), [1.0])

        ids[1] = 1

        np.testing.assert_array_equal(param.evaluate(0.0, pos), [2.0])

    def test_mesh_property_mutation_observed(self, small_mesh: Mesh) -> None:
        prop = small_mesh.get_property_vector("MaterialIDs")
        param = GroupBasedParameter("p", small_mesh, prop, [[1.0], [2.0]], MeshItemType.CELL)
        pos = SpatialPosition(element_id=0)

        prop.values[0] = 1

        np.testing.assert_array_equal(param.evaluate(0.0, pos), [2.0])


# =============================================================================
# Test validation and misc
# =============================================================================


class TestValidate:
    """Tests for validate()."""

    def test_valid(self, small_mesh: Mesh) -> None:
        prop = small_mesh.get_property_vector("MaterialIDs")
        param = GroupBasedParameter("p", small_mesh, prop, [[1.0], [2.0]], MeshItemType.CELL)
        assert param.validate() == []

    def test_missing_and_empty_groups(self) -> None:
        param = make_parameter([0, 1, 3], [[1.0], []])
        errors = param.validate()

        assert "Group IDs without value rows: [3]" in errors
        assert "Group IDs with no data: [1]" in errors

    def test_first_row_empty(self) -> None:
        param = make_parameter([1], [[], [1.0, 2.0]])

        assert param.n_components == 0
        assert any("Value row 0 is empty" in e for e in param.validate())

    def test_negative_group(self) -> None:
        param = make_parameter([-1, 0], [[1.0]])
        assert any("Negative group IDs" in e for e in param.validate())

    def test_size_mismatch_with_mesh(self, small_mesh: Mesh) -> None:
        param = make_parameter([0, 0, 0], [[1.0]], MeshItemType.CELL, mesh=small_mesh)
        errors = param.validate()
        assert any("has 3 entries" in e for e in errors)


class TestMisc:
    """Tests for accessors and concurrent use."""

    def test_group_values(self) -> None:
        param = make_parameter([0, 1], [[1.0], []])
        np.testing.assert_array_equal(param.group_values(0), [1.0])
        assert param.group_values(1).size == 0

    def test_mesh_item_type(self) -> None:
        assert make_parameter([0], [[1.0]], MeshItemType.NODE).mesh_item_type is MeshItemType.NODE

    def test_repr(self) -> None:
        result = repr(make_parameter([0], [[1.0, 2.0]]))
        assert "GroupBasedParameter(name='p'" in result
        assert "n_components=2" in result

    def test_concurrent_evaluation(self) -> None:
        n_items = 200
        index = [i % 4 for i in range(n_items)]
        rows = [[float(g), float(g) * 10.0] for g in range(4)]
        param = make_parameter(index, rows)
        failures: list[int] = []

        def worker() -> None:
            pos = SpatialPosition()
            for item in range(n_items):
                pos.set_element_id(item)
                expected = rows[item % 4]
                if not np.array_equal(param.evaluate(0.0, pos), expected):
                    failures.append(item)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert failures == []
