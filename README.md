# ogl_kit

Small helpers for graphics code: durations that pick the most readable time
unit, a frame-rate counter, text forms for vectors, matrices and quaternions
in the GLM naming style, and an identifier-expression check.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Time values (`ogl_kit.times`)

`TimeValues` holds one duration in seconds, milliseconds, microseconds and
nanoseconds; `TimeValues.from_nanoseconds` builds it from nanoseconds.
`Times` wraps such a duration and `relevant_timeframe()` returns a
`ValueLabel` for the largest unit in which the value exceeds one.

```python
from ogl_kit.times import Times

str(Times(2_500_000).relevant_timeframe())   # "2ms,500us,0ns"
str(Times(500).relevant_timeframe())         # "500 ns"
```

`ValueLabel` renders seconds, milliseconds and microseconds as split
components (`transform_time_seconds`, `transform_time_milli`,
`transform_time_micro`); any other label is printed as "value label".
The unit labels used by `Times` can be changed through its constructor.

## Frame rate (`ogl_kit.fps`)

`FPSCounter` counts frames and recomputes the frame rate, the time per frame
and the highest rate seen once at least a second has passed. The clock is a
callable returning nanoseconds (by default `time.perf_counter_ns`).

```python
from ogl_kit.fps import FPSCounter, transform_time

counter = FPSCounter("My Window", set_title=print)
counter.frame_in_title(vsync=False, show_max=True)   # call once per frame
transform_time(2.5)                                   # "2ms,500us,0ns"
```

`frame()` logs the statistics line through the `logging` module and returns
it; `frame_in_title()` prefixes the title, passes the text to `set_title`
when one is given, and returns it. `update()` only counts a frame. The
results are available as `fps`, `ms_per_frame`, `max_fps` and
`ms_per_frame_composition`.

## Vector and matrix strings (`ogl_kit.glm_string`)

```python
from ogl_kit.glm_string import ScalarType, vec_to_string, mat_to_string, quat_to_string

vec_to_string([1.0, 2.0, 3.0], ScalarType.DOUBLE)   # "dvec3(1, 2, 3)"
vec_to_string([True, False], "bool")                # "bvec2(true, false)"
mat_to_string([[1, 0], [0, 1]])                     # "mat2x2((1,0), (0,1))"
quat_to_string(1.0, 0.0, 0.0, 0.0)                  # "quat(1, [0, 0, 0])"
```

Matrices are given column by column, with 2 to 4 columns and rows; vectors
have 1 to 4 components. Other sizes raise `ValueError`.
`dualquat_to_string(real, dual)` takes two `(w, x, y, z)` sequences, and
`type_prefix` returns the prefix used for a `ScalarType` (`"d"` for double,
`"ld"` for long double, `"b"` for bool, `"u8"`, `"i8"`, and none for float
and other types).

## Identifier expressions (`ogl_kit.identifiers`)

```python
from ogl_kit.identifiers import is_id_expression

is_id_expression("std::vector")   # True
is_id_expression("obj.member")    # False
```

## What it does not do

The package opens no windows and draws nothing: it has no shader, buffer or
texture handling and no rendering loop. `FPSCounter` only builds the title
text; showing it is up to the `set_title` callable you pass. There is no
stopwatch or benchmarking timer class and no command-line program.