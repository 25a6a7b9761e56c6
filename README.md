# uinta

Small building blocks for a graphics engine, written in plain Python with no
dependencies outside the standard library.

## Modules

- `uinta.linalg`
  - `Vec2`, `Vec3` and `Vec4` support `+`, `-`, `*` and `/`. Addition and
    subtraction take another vector of the same type. Multiplication and
    division also take a number. `<`, `<=`, `>` and `>=` hold only when they
    hold for every component. A single argument fills every component, so
    `Vec3(2.0)` is `Vec3(2.0, 2.0, 2.0)`. `Vec3.from_vec2`, `Vec4.from_vec2`
    and `Vec4.from_vec3` widen a vector.
  - `Mat4` is a column-major 4x4 matrix. The default is the identity, and
    `Mat4(2.0)` puts 2.0 on the diagonal. `m[col, row]` addresses one
    element and `m[i]` addresses the flat storage.
  - `RunningAverage(count)` averages the last `count` samples, which it keeps
    in a ring buffer. Use `add` or `+=` to add a sample; `avg()` and
    `samples()` read it back.
  - `SmoothFloat(agility, target)` eases `current` towards `target` on
    `update(dt)`. `force()` jumps straight to the target.
- `uinta.camera`: `Camera` holds a position and an attitude, with `pitch`,
  `yaw` and `roll` properties. `Camera2D` holds a position, `fov` and
  `ortho_size`. The world axes are `WORLD_UP`, `WORLD_RIGHT` and
  `WORLD_FORWARD`.
- `uinta.buffers`: the `GlBuffer` and `MeshAttrib` records, the
  `MeshAttribType` enum, and `kilobytes(n)` and `megabytes(n)`.
- `uinta.metrics`: `MetricsController` holds up to 100 named 32-bit metrics
  of `MetricType.FLOAT`, `INT` or `UINT`.
  - Each metric is a raw cell that `getf`, `geti` and `getui` read in the
    representation they name.
  - An invalid handle, full storage or an out-of-range value raises
    `MetricsError`.
- `uinta.quadtree`: `Quad` is a square quadtree with y growing downward.
  - `insert(entity, pos)` creates child quads down to the smallest cell and
    stores the entity there. It returns `False` when `pos` is out of bounds.
  - `get`, `find_quad`, `is_in_bounds`, `is_active`, `clear` and `entities`
    query and reset the tree.
- `uinta.debug`
  - `DebugTimers` offers up to eight stopwatch slots. `create_timer()` and
    `reset_timer(handle)` start a slot. `duration_micro` and
    `duration_milli` read it in whole units.
  - `format_metric(metrics, handle, append)` builds a display line such as
    `"render 0.500000 "`.
- `uinta.fonts`
  - `FontType` lists the known fonts, and `font_path` and `font_size` give
    each font's relative file path and byte size.
  - `FontRegistry` hands out one handle per font type and atlas size.
  - `FontContext.char_quad` places one glyph from its `PackedChar` metrics.
  - `renderable_char_count`, `vertex_buffer_size` and `index_buffer_size`
    size buffers for a text.
- `uinta.textmesh`
  - `layout_lines` wraps a `Text` into `Line`s of `Word`s at its
    `max_width`.
  - `generate_mesh` returns a `TextMesh` in normalised device coordinates.
    It holds interleaved vertices, with position, UV and colour placed by
    `FontMeshAttrib` stride and offset, and two triangles per glyph.

## Examples

```python
from uinta.linalg import Vec2, RunningAverage

Vec2(1.0, 2.0) + Vec2(3.0, 4.0)   # Vec2(x=4.0, y=6.0)

avg = RunningAverage(2)
avg.add(2.0)
avg.add(4.0)
avg.avg()                          # 3.0
```

```python
from uinta.metrics import MetricsController, MetricType

metrics = MetricsController()
handle = metrics.init_metric(MetricType.FLOAT, "render")
metrics.set(handle, 0.5)
metrics.getf(handle)               # 0.5
```

```python
from uinta.linalg import Vec2
from uinta.quadtree import Quad

tree = Quad(Vec2(0.0), Vec2(64.0), 1)
tree.insert(7, Vec2(1.0))          # True
tree.get(Vec2(1.0))                # (7,)
```

```python
from uinta.fonts import renderable_char_count, index_buffer_size

renderable_char_count("hello world")   # 10
index_buffer_size("hi")                # 12
```

## What this package does not do

It does not open windows, talk to a GPU, compile shaders or upload buffers.
Values such as `GlBuffer.id` and `FontContext.texture_id` are plain
bookkeeping.

It does not read or rasterise font files either. A `FontContext` starts with
empty glyph metrics, and the caller fills `chardata` and `asc` before
`generate_mesh` produces useful geometry.

## Running the tests

```
pip install .[test]
pytest
```