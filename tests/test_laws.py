from hypothesis import given
from hypothesis import strategies as st

from monokit.laws import associativity, left_identity, right_identity
from monokit.monoid import empty
from monokit.semigroup import All, Any, Max, Min, Product

small_ints = st.integers(min_value=-1000, max_value=1000)
optional_text = st.one_of(st.none(), st.text())


@given(st.text(), st.text(), st.text())
def test_string_associativity(a, b, c):
    assert associativity(a, b, c)


@given(optional_text, optional_text, optional_text)
def test_option_associativity(a, b, c):
    assert associativity(a, b, c)


@given(st.lists(small_ints), st.lists(small_ints), st.lists(small_ints))
def test_list_associativity(a, b, c):
    assert associativity(a, b, c)


@given(st.sets(small_ints), st.sets(small_ints), st.sets(small_ints))
def test_set_associativity(a, b, c):
    assert associativity(a, b, c)


_text_maps = st.dictionaries(st.integers(min_value=-8, max_value=8), st.text())


@given(_text_maps, _text_maps, _text_maps)
def test_dict_associativity(a, b, c):
    assert associativity(a, b, c)


@given(small_ints, small_ints, small_ints)
def test_max_associativity(a, b, c):
    assert associativity(Max(a), Max(b), Max(c))


@given(small_ints, small_ints, small_ints)
def test_min_associativity(a, b, c):
    assert associativity(Min(a), Min(b), Min(c))


@given(st.booleans(), st.booleans(), st.booleans())
def test_any_associativity(a, b, c):
    assert associativity(Any(a), Any(b), Any(c))


@given(st.booleans(), st.booleans(), st.booleans())
def test_all_associativity(a, b, c):
    assert associativity(All(a), All(b), All(c))


@given(st.text())
def test_string_identity(a):
    assert left_identity(a)
    assert right_identity(a)


@given(optional_text)
def test_option_identity(a):
    assert left_identity(a, zero=None)
    assert right_identity(a, zero=None)


@given(st.lists(st.text()))
def test_list_identity(a):
    assert left_identity(a)
    assert right_identity(a)


@given(st.sets(small_ints))
def test_set_identity(a):
    assert left_identity(a, zero=empty(set))
    assert right_identity(a, zero=empty(set))


@given(_text_maps)
def test_dict_identity(a):
    assert left_identity(a, zero=empty(dict))
    assert right_identity(a, zero=empty(dict))


@given(small_ints)
def test_any_int_identity(a):
    assert left_identity(Any(a))
    assert right_identity(Any(a))


@given(small_ints)
def test_all_int_identity(a):
    assert left_identity(All(a))
    assert right_identity(All(a))


@given(small_ints)
def test_int_identity(a):
    assert left_identity(a)
    assert right_identity(a)


@given(small_ints)
def test_product_identity(a):
    assert left_identity(Product(a))
    assert right_identity(Product(a))


def test_identity_fails_with_wrong_zero():
    assert left_identity(5, zero=1) is False
    assert right_identity("a", zero="b") is False


def test_identity_holds_with_right_zero():
    assert left_identity(5, zero=0) is True
    assert right_identity(Product(7), zero=Product(1)) is True