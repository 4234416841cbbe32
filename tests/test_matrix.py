import pytest

from piscript.matrix import cross, dot, eye, is_mat, mult, ones, size, zeros
from piscript.values import PiError, PiList, PiString


def _rows(mat):
    return [list(row) for row in mat]


def test_zeros_shape_and_content():
    mat = zeros(2, 3)
    assert _rows(mat) == [[0, 0, 0], [0, 0, 0]]
    assert list(size(mat)) == [2, 3]
    assert is_mat(mat)


def test_ones_content():
    assert _rows(ones(2, 2)) == [[1, 1], [1, 1]]


def test_eye_diagonal():
    mat = eye(3, 4)
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            assert value == (1 if i == j else 0)
    assert list(size(mat)) == [3, 4]


def test_size_result_flags():
    result = size(zeros(1, 1))
    assert (result.rows, result.cols) == (1, 2)
    assert result.is_numeric


def test_dims_must_be_numbers():
    with pytest.raises(PiError):
        zeros(PiString("2"), 3)
    with pytest.raises(PiError):
        eye(2, None)


def test_size_requires_matrix():
    with pytest.raises(PiError):
        size(PiList([1, 2]))
    with pytest.raises(PiError):
        size(3)


def test_mult_by_identity_is_unchanged():
    a = PiList([PiList([1, 2, 3]), PiList([4, 5, 6])])
    assert _rows(mult(a, eye(3, 3))) == _rows(a)
    assert _rows(mult(eye(2, 2), a)) == _rows(a)


def test_mult_result_shape():
    product = mult(ones(2, 3), ones(3, 4))
    assert (product.rows, product.cols) == (2, 4)
    assert all(value == 3 for row in product for value in row)


def test_mult_dimension_mismatch():
    with pytest.raises(PiError):
        mult(ones(2, 3), ones(2, 3))


def test_mult_requires_numeric():
    bad = PiList([PiList([PiString("a")])])
    with pytest.raises(PiError):
        mult(bad, ones(1, 1))


def test_dot_is_symmetric_and_zero_with_zeros():
    a = PiList([1, 2, 3])
    b = PiList([4, -5, 6])
    assert dot(a, b) == dot(b, a)
    assert dot(a, PiList([0, 0, 0])) == 0


def test_dot_length_mismatch():
    with pytest.raises(PiError):
        dot(PiList([1, 2]), PiList([1, 2, 3]))


def test_cross_unit_vectors():
    assert list(cross(PiList([1, 0, 0]), PiList([0, 1, 0]))) == [0, 0, 1]


def test_cross_is_orthogonal_to_inputs():
    a = PiList([1, 2, 3])
    b = PiList([-2, 5, 7])
    c = cross(a, b)
    assert dot(c, a) == 0
    assert dot(c, b) == 0
    assert list(cross(a, a)) == [0, 0, 0]
    assert is_mat(c)


def test_cross_requires_3d():
    with pytest.raises(PiError):
        cross(PiList([1, 2]), PiList([3, 4]))


def test_is_mat():
    assert is_mat(zeros(2, 2)) is True
    assert is_mat(PiList([1, 2])) is False
    with pytest.raises(PiError):
        is_mat(5)