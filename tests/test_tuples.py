import math

import pytest

from mallas3d.tuples import Vec


def test_components_and_length():
    v = Vec(1, 2, 3)
    assert len(v) == 3
    assert v[0] == 1 and v[1] == 2 and v[2] == 3
    assert list(v) == [1, 2, 3]


def test_construct_from_iterable_equals_from_args():
    assert Vec([0.5, -0.5, 0.5]) == Vec(0.5, -0.5, 0.5)
    assert Vec(x for x in (1, 2)) == Vec(1, 2)


def test_equality_with_tuple():
    assert Vec(1, 2, 3) == (1, 2, 3)
    assert not (Vec(1, 2, 3) == (1, 2, 4))


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Vec(1, 2, 3)[3]


def test_empty_rejected():
    with pytest.raises(ValueError):
        Vec()


def test_non_numeric_rejected():
    with pytest.raises(TypeError):
        Vec("a", 1)


def test_add_sub_round_trip():
    a = Vec(1.5, -2.0, 3.25)
    b = Vec(0.25, 4.0, -1.0)
    assert (a + b) - b == a
    assert a - a == Vec(0.0, 0.0, 0.0)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Vec(1, 2) + Vec(1, 2, 3)
    with pytest.raises(ValueError):
        Vec(1, 2).dot(Vec(1, 2, 3))


def test_negation():
    a = Vec(1, -2, 3)
    assert -(-a) == a
    assert a + (-a) == Vec(0, 0, 0)


def test_scalar_multiplication_both_sides():
    a = Vec(1, 2, 3)
    assert a * 2 == 2 * a
    assert a * 2 == a + a


def test_division_inverts_multiplication():
    a = Vec(1.0, 2.0, 3.0)
    assert (a / 2) * 2 == a


def test_dot_symmetry_and_operator():
    a = Vec(1, 2, 3)
    b = Vec(4, -5, 6)
    assert a.dot(b) == b.dot(a)
    assert (a | b) == a.dot(b)


def test_length_sq_matches_dot():
    a = Vec(3, 4)
    assert a.length_sq() == a.dot(a)
    assert a.length_sq() == 25


def test_normalized_has_unit_length():
    n = Vec(3.0, -7.0, 2.0).normalized()
    assert math.isclose(n.length_sq(), 1.0)


def test_normalized_keeps_direction():
    a = Vec(2.0, 0.0, 0.0)
    assert a.normalized() == Vec(1.0, 0.0, 0.0)


def test_normalized_zero_raises():
    with pytest.raises(ValueError):
        Vec(0.0, 0.0, 0.0).normalized()


def test_cross_of_basis_vectors():
    x = Vec(1, 0, 0)
    y = Vec(0, 1, 0)
    z = Vec(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y


def test_cross_orthogonal_and_anticommutative():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-12)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-12)
    assert b.cross(a) == -c


def test_cross_requires_three_components():
    with pytest.raises(ValueError):
        Vec(1, 2).cross(Vec(3, 4))


def test_str_format():
    assert str(Vec(1, 2, 3)) == "(1,2,3)"
    assert str(Vec(0.5, -0.5)) == "(0.5,-0.5)"


def test_hash_consistent_with_equality():
    assert hash(Vec(1, 2, 3)) == hash(Vec([1, 2, 3]))
    assert len({Vec(1, 2), Vec(1, 2), Vec(2, 1)}) == 2