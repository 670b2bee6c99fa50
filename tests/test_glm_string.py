import re

import pytest

from ogl_kit.glm_string import (
    ScalarType,
    dualquat_to_string,
    mat_to_string,
    quat_to_string,
    type_prefix,
    vec_to_string,
)


@pytest.mark.parametrize(
    ("scalar", "prefix"),
    [
        (ScalarType.FLOAT, ""),
        (ScalarType.DOUBLE, "d"),
        (ScalarType.LONG_DOUBLE, "ld"),
        (ScalarType.BOOL, "b"),
        (ScalarType.UINT8, "u8"),
        (ScalarType.INT8, "i8"),
        (ScalarType.INT, ""),
    ],
)
def test_type_prefix(scalar, prefix):
    assert type_prefix(scalar) == prefix
    assert type_prefix(scalar.value) == prefix


def test_unknown_scalar_name_rejected():
    with pytest.raises(ValueError):
        type_prefix("quadruple")


def test_float_vector_whole_values():
    assert vec_to_string([1.0, 2.0, 3.0]) == "vec3(1, 2, 3)"


def test_bool_vector_labels():
    result = vec_to_string([True, False], ScalarType.BOOL)
    assert result == "bvec2(true, false)"


def test_bool_vector_four_items_in_order():
    result = vec_to_string([False, True, True, False], ScalarType.BOOL)
    inner = result[len("bvec4("):-1]
    assert result.startswith("bvec4(")
    assert inner.split(", ") == ["false", "true", "true", "false"]


@pytest.mark.parametrize("scalar", list(ScalarType))
@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_vector_header_matches_prefix_and_size(scalar, size):
    result = vec_to_string([1] * size, scalar)
    assert result.startswith(f"{type_prefix(scalar)}vec{size}(")
    assert result.endswith(")")
    assert result.count(", ") == size - 1


def test_double_prefix_added_to_float_form():
    values = [0.5, -2.25]
    assert vec_to_string(values, ScalarType.DOUBLE) == "d" + vec_to_string(values)


def test_fractional_values_kept():
    result = vec_to_string([0.5, 0.25], ScalarType.DOUBLE)
    assert result[len("dvec2("):-1].split(", ") == ["0.5", "0.25"]


@pytest.mark.parametrize("components", [[], [1, 2, 3, 4, 5]])
def test_vector_length_out_of_range(components):
    with pytest.raises(ValueError):
        vec_to_string(components)


def test_mat2x2_has_no_inner_spaces():
    assert mat_to_string([[1, 2], [3, 4]]) == "mat2x2((1,2), (3,4))"


def _groups(text):
    return [g.split(", ") for g in re.findall(r"\(([^()]*)\)", text)]


@pytest.mark.parametrize("cols", [2, 3, 4])
@pytest.mark.parametrize("rows", [2, 3, 4])
def test_matrix_shape_and_column_order(cols, rows):
    columns = [[c * 10 + r for r in range(rows)] for c in range(cols)]
    result = mat_to_string(columns, ScalarType.DOUBLE)
    assert result.startswith(f"dmat{cols}x{rows}(")
    groups = _groups(result)
    assert len(groups) == cols
    if cols == 2 and rows == 2:
        groups = [g[0].split(",") for g in groups]
    assert groups == [[str(v) for v in col] for col in columns]


def test_matrix_ragged_columns_rejected():
    with pytest.raises(ValueError):
        mat_to_string([[1, 2, 3], [4, 5]])


@pytest.mark.parametrize("columns", [[[1, 2]], [[1], [2]], [[1, 2]] * 5])
def test_matrix_size_out_of_range(columns):
    with pytest.raises(ValueError):
        mat_to_string(columns)


def test_quaternion_layout():
    result = quat_to_string(1, 2, 3, 4, ScalarType.DOUBLE)
    match = re.fullmatch(r"dquat\((\S+), \[(\S+), (\S+), (\S+)\]\)", result)
    assert match is not None
    assert match.groups() == ("1", "2", "3", "4")


def test_quaternion_float_has_no_prefix():
    result = quat_to_string(0.5, 0, 0, 0.5)
    assert result.startswith("quat(")
    assert "[0, 0, 0.5]" in result


def test_dual_quaternion_layout():
    result = dualquat_to_string((1, 0, 0, 0), (0, 5, 6, 7), ScalarType.LONG_DOUBLE)
    match = re.fullmatch(
        r"lddualquat\(\((\S+), \[(\S+), (\S+), (\S+)\]\), \((\S+), \[(\S+), (\S+), (\S+)\]\)\)",
        result,
    )
    assert match is not None
    assert match.groups() == ("1", "0", "0", "0", "0", "5", "6", "7")


def test_dual_quaternion_parts_match_quaternions():
    real = (1, 2, 3, 4)
    dual = (5, 6, 7, 8)
    result = dualquat_to_string(real, dual)
    real_body = quat_to_string(*real)[len("quat"):]
    dual_body = quat_to_string(*dual)[len("quat"):]
    assert result == f"dualquat({real_body}, {dual_body})"


def test_dual_quaternion_wrong_part_size():
    with pytest.raises(ValueError):
        dualquat_to_string((1, 2, 3), (1, 2, 3, 4))