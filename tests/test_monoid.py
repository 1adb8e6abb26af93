from fractions import Fraction

import pytest

from monokit.monoid import combine_all, combine_n, empty, empty_like
from monokit.semigroup import All, Any, Max, Min, Product


def test_combine_n():
    assert combine_n(1, 0) == 0
    assert combine_n(2, 1) == 2
    assert combine_n(2, 0, zero=None) is None
    assert combine_n(2, 4) == 8


def test_combine_n_negative_raises():
    with pytest.raises(ValueError):
        combine_n(2, -1)


def test_combine_n_zero_times_string():
    assert combine_n("ab", 0) == ""
    assert combine_n("ab", 3) == "ababab"


def test_combine_all_basic():
    assert combine_all([1, 2, 3]) == 6
    assert combine_all([], zero=0) == 0
    assert combine_all([], zero=None) is None
    assert combine_all(["Hello", " World"]) == "Hello World"
    assert combine_all([1, 3]) == 4


def test_combine_all_optional_values():
    assert combine_all([None, "Hello", None, " World"]) == "Hello World"
    assert combine_all([None, None]) is None


def test_combine_all_empty_without_zero_raises():
    with pytest.raises(ValueError):
        combine_all([])


def test_combine_all_hashset():
    assert combine_all([], zero=empty(set)) == set()
    assert combine_all([{1}, {2}, {3}]) == {1, 2, 3}


def test_combine_all_hashmap():
    assert combine_all([], zero=empty(dict)) == {}
    h1 = {1: "Hello"}
    h2 = {1: " World", 2: "Goodbye"}
    h3 = {3: "Cruel World"}
    expected = {1: "Hello World", 2: "Goodbye", 3: "Cruel World"}
    assert combine_all([h1, h2, h3]) == expected


def test_combine_all_all():
    assert combine_all([], zero=empty(All, int)) == All(~0)
    assert combine_all([All(3), All(7)]) == All(3)
    assert combine_all([], zero=empty(All, bool)) == All(True)
    assert combine_all([All(False), All(False)]) == All(False)
    assert combine_all([All(True), All(True)]) == All(True)


def test_combine_all_any():
    assert combine_all([], zero=empty(Any, int)) == Any(0)
    assert combine_all([Any(3), Any(8)]) == Any(11)
    assert combine_all([], zero=empty(Any, bool)) == Any(False)
    assert combine_all([Any(False), Any(False)]) == Any(False)
    assert combine_all([Any(True), Any(False)]) == Any(True)


def test_combine_all_tuple():
    t1 = (1, 2.5, "hi", 3)
    t2 = (1, 2.5, " world", None)
    t3 = (1, 2.5, ", goodbye", 10)
    assert combine_all([t1, t2, t3]) == (3, 7.5, "hi world, goodbye", 13)


def test_combine_all_product():
    assert combine_all([Product(2), Product(3), Product(4)]) == Product(24)


def test_combine_all_accepts_generator():
    assert combine_all(x for x in [[1], [2, 3]]) == [1, 2, 3]


@pytest.mark.parametrize(
    "kind, inner, expected",
    [
        (int, None, 0),
        (float, None, 0.0),
        (str, None, ""),
        (bytes, None, b""),
        (list, None, []),
        (dict, None, {}),
        (None, None, None),
        (All, None, All(True)),
        (Any, None, Any(False)),
        (All, int, All(-1)),
        (Any, int, Any(0)),
        (Product, int, Product(1)),
        (Product, float, Product(1.0)),
        (tuple, (int, str, (Product, int), None), (0, "", Product(1), None)),
    ],
)
def test_empty_values(kind, inner, expected):
    assert empty(kind, inner) == expected


def test_empty_fraction():
    assert empty(Fraction) == Fraction(0)


@pytest.mark.parametrize("kind", [Max, Min, bool, object])
def test_empty_without_identity_raises(kind):
    with pytest.raises(TypeError):
        empty(kind)


def test_empty_all_of_float_raises():
    with pytest.raises(TypeError):
        empty(All, float)


def test_empty_like():
    assert empty_like(5) == 0
    assert empty_like("x") == ""
    assert empty_like({1: "a"}) == {}
    assert empty_like((1, "a", None, All(4))) == (0, "", None, All(~0))
    assert empty_like(Product(3.0)) == Product(1.0)
    assert empty_like(Any(True)) == Any(False)


def test_empty_like_max_raises():
    with pytest.raises(TypeError):
        empty_like(Max(3))