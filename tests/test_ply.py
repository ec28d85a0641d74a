import pytest

from mallas3d.ply import PlyError, parse, read, read_vertices, resolve_path
from mallas3d.tuples import Vec

TRIANGLE = """ply
format ascii 1.0
comment a single triangle
element vertex 3
property float x
property float y
property float z
element face 1
property list uchar int vertex_indices
end_header
0 0 0
1 0 0
0 1 0
3 0 1 2
"""

PROFILE = """ply
format ascii 1.0
element vertex 2
property float x
property float y
property float z
end_header
1.5 -2 0
1.5 2 0
"""


def test_resolve_path_appends_extension():
    assert resolve_path("model") == "model.ply"


def test_resolve_path_keeps_ply_extension():
    assert resolve_path("dir/model.ply") == "dir/model.ply"


def test_resolve_path_appends_after_other_extension():
    assert resolve_path("model.txt") == "model.txt.ply"


def test_parse_triangle():
    vertices, faces = parse(TRIANGLE, True)
    assert vertices == [Vec(0.0, 0.0, 0.0), Vec(1.0, 0.0, 0.0), Vec(0.0, 1.0, 0.0)]
    assert faces == [Vec(0, 1, 2)]


def test_parse_without_faces_ignores_face_list():
    vertices, faces = parse(TRIANGLE, False)
    assert len(vertices) == 3
    assert faces == []


def test_extra_vertex_properties_are_ignored():
    text = TRIANGLE.replace("1 0 0\n", "1 0 0 0.5 0.25\n")
    vertices, _ = parse(text, True)
    assert vertices[1] == Vec(1.0, 0.0, 0.0)


def test_read_file_adds_extension(tmp_path):
    (tmp_path / "tri.ply").write_text(TRIANGLE)
    vertices, faces = read(tmp_path / "tri")
    assert len(vertices) == 3
    assert faces == [Vec(0, 1, 2)]


def test_read_vertices_of_profile(tmp_path):
    (tmp_path / "perfil.ply").write_text(PROFILE)
    vertices = read_vertices(str(tmp_path / "perfil.ply"))
    assert vertices == [Vec(1.5, -2.0, 0.0), Vec(1.5, 2.0, 0.0)]


def test_read_needs_face_element(tmp_path):
    (tmp_path / "perfil.ply").write_text(PROFILE)
    with pytest.raises(PlyError):
        read(tmp_path / "perfil.ply")


def test_missing_file(tmp_path):
    with pytest.raises(PlyError):
        read(tmp_path / "absent")


def test_must_start_with_ply():
    with pytest.raises(PlyError):
        parse("solid\n" + TRIANGLE, True)


def test_binary_format_rejected():
    text = TRIANGLE.replace("format ascii 1.0", "format binary_little_endian 1.0")
    with pytest.raises(PlyError):
        parse(text, True)


def test_quad_face_rejected():
    text = TRIANGLE.replace("3 0 1 2", "4 0 1 2 0")
    with pytest.raises(PlyError):
        parse(text, True)


def test_index_out_of_range_rejected():
    text = TRIANGLE.replace("3 0 1 2", "3 0 1 3")
    with pytest.raises(PlyError):
        parse(text, True)


def test_premature_end_in_vertices():
    text = TRIANGLE.split("0 1 0\n")[0]
    with pytest.raises(PlyError):
        parse(text, True)


def test_premature_end_in_faces():
    text = TRIANGLE.replace("3 0 1 2\n", "")
    with pytest.raises(PlyError):
        parse(text, True)


def test_missing_end_header():
    text = TRIANGLE.split("end_header")[0]
    with pytest.raises(PlyError):
        parse(text, True)


def test_zero_vertices_rejected():
    text = PROFILE.replace("element vertex 2", "element vertex 0")
    with pytest.raises(PlyError):
        parse(text, False)


def test_face_before_vertex_rejected():
    text = (
        "ply\nformat ascii 1.0\nelement face 1\nelement vertex 3\nend_header\n"
        "0 0 0\n1 0 0\n0 1 0\n3 0 1 2\n"
    )
    with pytest.raises(PlyError):
        parse(text, True)


def test_round_trip_vertex_count_matches_header():
    vertices, faces = parse(TRIANGLE, True)
    for face in faces:
        assert all(0 <= index < len(vertices) for index in face)
    assert all(len(v) == 3 for v in vertices)