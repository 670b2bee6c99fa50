"""Text forms of vectors, matrices and quaternions in the GLM naming style."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Sequence

LABEL_TRUE = "true"
LABEL_FALSE = "false"


class ScalarType(Enum):
    """Component types a vector, matrix or quaternion can be built from."""

    FLOAT = "float"
    DOUBLE = "double"
    LONG_DOUBLE = "long double"
    BOOL = "bool"
    UINT8 = "uint8"
    INT8 = "int8"
    INT = "int"
    UINT = "uint"

    @property
    def prefix(self) -> str:
        """Short prefix placed before the type name."""
        return _PREFIXES.get(self, "")


_PREFIXES = {
    ScalarType.FLOAT: "",
    ScalarType.DOUBLE: "d",
    ScalarType.LONG_DOUBLE: "ld",
    ScalarType.BOOL: "b",
    ScalarType.UINT8: "u8",
    ScalarType.INT8: "i8",
}


def _scalar(scalar: ScalarType | str) -> ScalarType:
    return scalar if isinstance(scalar, ScalarType) else ScalarType(scalar)


def type_prefix(scalar: ScalarType | str) -> str:
    """Return the type prefix for a scalar type ('' for float and generic types)."""
    return _scalar(scalar).prefix


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return LABEL_TRUE if value else LABEL_FALSE
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        if math.isfinite(value) and value == int(value) and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


def _join(values: Iterable[object], sep: str = ", ") -> str:
    return sep.join(_format_value(v) for v in values)


def vec_to_string(components: Sequence[object], scalar: ScalarType | str = ScalarType.FLOAT) -> str:
    """Render a vector of one to four components, e.g. 'dvec2(1, 2)'."""
    kind = _scalar(scalar)
    values = list(components)
    size = len(values)
    if not 1 <= size <= 4:
        raise ValueError(f"vector length must be between 1 and 4, got {size}")
    if kind is ScalarType.BOOL:
        values = [bool(v) for v in values]
    return f"{kind.prefix}vec{size}({_join(values)})"


def mat_to_string(columns: Sequence[Sequence[object]], scalar: ScalarType | str = ScalarType.FLOAT) -> str:
    """Render a column-major matrix of 2 to 4 columns and rows, e.g. 'mat3x2((1, 2), ...)'."""
    kind = _scalar(scalar)
    cols = [list(col) for col in columns]
    count = len(cols)
    if not 2 <= count <= 4:
        raise ValueError(f"matrix must have between 2 and 4 columns, got {count}")
    rows = len(cols[0])
    if not 2 <= rows <= 4:
        raise ValueError(f"matrix must have between 2 and 4 rows, got {rows}")
    if any(len(col) != rows for col in cols):
        raise ValueError("all matrix columns must have the same length")
    # The 2x2 form has no space between the components of a column.
    inner_sep = "," if count == 2 and rows == 2 else ", "
    body = ", ".join(f"({_join(col, inner_sep)})" for col in cols)
    return f"{kind.prefix}mat{count}x{rows}({body})"


def _quat_body(w: object, x: object, y: object, z: object) -> str:
    return f"{_format_value(w)}, [{_join((x, y, z))}]"


def quat_to_string(w: object, x: object, y: object, z: object, scalar: ScalarType | str = ScalarType.FLOAT) -> str:
    """Render a quaternion as 'quat(w, [x, y, z])'."""
    kind = _scalar(scalar)
    return f"{kind.prefix}quat({_quat_body(w, x, y, z)})"


def dualquat_to_string(
    real: Sequence[object], dual: Sequence[object], scalar: ScalarType | str = ScalarType.FLOAT
) -> str:
    """Render a dual quaternion from its real and dual parts, each given as (w, x, y, z)."""
    kind = _scalar(scalar)
    parts = [list(real), list(dual)]
    if any(len(part) != 4 for part in parts):
        raise ValueError("dual quaternion parts must each have four components (w, x, y, z)")
    body = ", ".join(f"({_quat_body(*part)})" for part in parts)
    return f"{kind.prefix}dualquat({body})"