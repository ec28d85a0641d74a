# mallas3d

Indexed triangle meshes in plain Python: small vector tuples, an ASCII PLY
reader, ready-made solids (cube, tetrahedron, cylinder, cone, sphere),
surfaces of revolution built from a profile, and a windowing-free model of
a viewer scene with its camera, keys and projection frustum. It has no
dependencies beyond the standard library.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Vectors

`mallas3d.tuples.Vec` is an immutable tuple of numbers. Build it from its
components, `Vec(1, 2, 3)`, or from one iterable, `Vec([1, 2, 3])`. It
supports indexing, `len`, iteration, equality with other `Vec`s, tuples and
lists, component-wise `+` and `-`, negation, multiplication and division by
a scalar, `dot` (also written `a | b`), `length_sq`, `normalized` (raises
`ValueError` for a zero-length tuple) and, for three components, `cross`.
Mixing sizes raises `ValueError`.

```python
from mallas3d.tuples import Vec

a = Vec(1.0, 0.0, 0.0)
b = Vec(0.0, 1.0, 0.0)
print(a.cross(b))   # (0,0,1)
print(a | b)        # 0.0
```

`str()` writes the components between parentheses, separated by commas,
with floats in `%g` form.

## Reading PLY files

`mallas3d.ply` reads ASCII PLY files made of triangles:

- `read(name)` returns `(vertices, faces)` as lists of `Vec`.
- `read_vertices(name)` returns only the vertices; face elements are ignored.
- `parse(text, with_faces)` does the same from a string and returns
  `(vertices, faces)`, with an empty face list when `with_faces` is false.
- `resolve_path(name)` appends `.ply` to a name whose last dot-separated
  part is not `ply`; `read` and `read_vertices` use it.

Files that cannot be opened, are not ASCII, lack a vertex or face count,
end early, hold a face with other than 3 vertices, or refer to a vertex
index out of range raise `mallas3d.ply.PlyError`. Successful reads are
reported through the `logging` module at INFO level.

## Meshes

`mallas3d.mesh.Mesh(vertices, triangles)` holds a vertex table and a table
of index triples, checking that each vertex has 3 coordinates and each
triangle 3 indices into the vertex table.

```python
from mallas3d.mesh import make_cube, make_sphere, revolve

cube = make_cube()
print(len(cube.vertices), len(cube.triangles))   # 8 12

sphere = make_sphere(20, 70, 0.5)
cone = revolve([(0.0, -0.5, 0.0), (0.5, -0.5, 0.0), (0.0, 0.5, 0.0)], 40)
```

- `Mesh.vertex_array()` and `Mesh.index_array()` give flat lists ready for
  a vertex buffer.
- `Mesh.chessboard()` returns a `Chessboard` with the even- and
  odd-positioned triangles, and one colour per vertex for each half
  (green for even, blue for odd).
- `make_cube()` and `make_tetrahedron()` build the fixed solids.
- `rotate_point(point, step, instances)` turns a point about the Y axis by
  `step` of `instances` equal parts of a full turn.
- `revolve(profile, instances)` sweeps a profile around the Y axis and
  closes it with a bottom cap (centred at the height of the last profile
  point) and a top cap (at the height of the first).
- `make_cylinder`, `make_cone` and `make_sphere` build solids of
  revolution; their `num_profile_vertices` argument is accepted but not used.
- `mesh_from_ply(name)` loads a mesh from a PLY file, and
  `revolution_from_ply(name, instances=30)` revolves the vertices of a PLY
  file taken as a profile.

`DrawMode` names the primitives `POINTS`, `LINES` and `TRIANGLES`, valued as
their OpenGL enumerants.

## Axes

`mallas3d.axes.Axes(size=1000.0)` describes the X, Y and Z axes from
`-size` to `+size`, coloured red, green and blue. `segments()` returns
`(colour, start, end)` per axis, `vertex_array()` and `color_array()` the
flattened end points and their colours, and `change_size(size)` sets a new
half-length.

## Scene

`mallas3d.scene.Scene(objects)` holds a non-empty list of meshes and the
viewer state: the current object, drawing mode, chessboard flag,
immediate/deferred setting, camera angles and distance, and window size.

- `key_pressed(key)` handles letter keys, case-insensitively: `P`, `L`, `T`
  choose points, lines or triangles; `A` chooses triangles in chessboard
  colours; `V` steps the drawing setting (see the `deferred` property);
  `O` selects the next object; `Q` returns `True` to ask for exit. Every key
  clears the chessboard flag first.
- `special_key(key)` turns the camera with the arrow keys and moves it away
  or closer by a factor of 1.2 with page up and page down, using
  `SpecialKey` values; other codes are ignored.
- `current_object()` returns the selected mesh, `observer()` the camera as
  `(distance, angle_x, angle_y)`.
- `resize(width, height)` records the window size and `frustum()` returns
  the resulting `Frustum`.

`build_default_objects(ply_dir)` creates the standard set of nine objects:
cube, tetrahedron, the models `big_dodge.ply`, `ant.ply` and `beethoven.ply`,
a revolution of `peon.ply`, a sphere, a cone and a cylinder. The four PLY
files must exist in `ply_dir`.

## What it does not do

The package draws nothing. It opens no window, issues no graphics calls
and has no command to start a viewer; `Scene`, `Axes` and `Mesh` only hold
the data and state a renderer would use. No PLY models are shipped with it,
and only ASCII triangle PLY files can be read.