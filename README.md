# monokit

Small algebraic building blocks for everyday Python values:

- **`monokit.semigroup`** – combine two values of the same shape.
- **`monokit.monoid`** – empty (identity) values, so a whole sequence can be
  folded, even an empty one.
- **`monokit.laws`** – predicates that check associativity and identity,
  handy for property-based tests.
- **`monokit.validated`** – run several checks and collect *every* error
  instead of stopping at the first.
- **`monokit.path`** – reusable, composable field paths such as
  `dimensions.height` that read and write nested objects.

The package has no dependencies outside the standard library.

## Installation

```
pip install monokit
```

## Semigroups

`combine(left, right)` knows the common built-in types:

- `None` means "nothing here": the other side is returned unchanged;
- numbers are added;
- strings, bytes and lists are concatenated;
- sets are united;
- dicts are merged, combining the values of keys present on both sides;
- tuples are combined element by element (a length mismatch raises
  `ValueError`);
- objects with their own `combine(other)` method are combined by calling it.

Mismatched kinds raise `TypeError`, as do plain booleans: wrap them in `All`
or `Any`.

```python
from monokit.semigroup import combine, combine_all_option, combine_n, Max, Min, Product, All, Any

combine(1, 2)                                   # 3
combine("Hello", " world")                      # "Hello world"
combine((1, 2.5, "hi", 3), (1, 2.5, " world", None))
# (2, 5.0, "hi world", 3)
combine({1: "Hello", 2: "Goodbye"}, {1: " World"})
# {1: "Hello World", 2: "Goodbye"}

combine_all_option([Max(1), Max(2), Max(3)])    # Max(value=3)
combine_all_option([Min(1), Min(2), Min(3)])    # Min(value=1)
combine_all_option([])                          # None
combine_n(2, 4)                                 # 8
Product(2).combine(Product(3))                  # Product(value=6)
All(3).combine(All(5))                          # All(value=1)
Any(3).combine(Any(5))                          # Any(value=7)
Any(True).combine(Any(False))                   # Any(value=True)
```

`Max`, `Min`, `Product`, `All` and `Any` are frozen, ordered dataclasses
with a single `value` field; combining two different wrapper types raises
`TypeError`.

## Monoids

```python
from monokit.monoid import combine_all, combine_n, empty, empty_like
from monokit.semigroup import All, Any, Product

combine_all([1, 2, 3])                          # 6
combine_all(["Hello", " World"])                # "Hello World"
combine_all([{1: "Hello"}, {1: " World", 2: "Goodbye"}, {3: "Cruel World"}])
# {1: "Hello World", 2: "Goodbye", 3: "Cruel World"}
combine_all([Product(2), Product(3), Product(4)])   # Product(value=24)
combine_all([], zero=0)                         # 0
combine_all([])                                 # ValueError: pass zero

combine_n(2, 0)                                 # 0
combine_n(2, 0, zero=0)                         # 0
combine_n(2, 3)                                 # 6

empty(int)                                      # 0
empty(str)                                      # ""
empty(None)                                     # None
empty(All)                                      # All(value=True)
empty(All, int)                                 # All(value=-1), every bit set
empty(Any, int)                                 # Any(value=0)
empty(Product, float)                           # Product(value=1.0)
empty(tuple, [int, str, (Product, int)])        # (0, "", Product(value=1))
empty_like((1, "a", [2]))                       # (0, "", [])
```

`Max` and `Min` have no empty value, and neither do plain booleans; asking
for one raises `TypeError`. A class that is not built in may provide its own
empty value through a callable `empty` attribute.

## Laws

```python
from monokit.laws import associativity, left_identity, right_identity

associativity([1], [2], [3])                    # True
left_identity("abc")                            # True
right_identity({1: "x"})                        # True
left_identity(5, zero=0)                        # True
```

Each function returns whether the law holds, so it can be used directly as a
property in hypothesis tests.

## Validated

```python
from monokit.validated import Ok, Err, ValidationError, into_validated, valid, invalid

v = into_validated(Ok("James")) + Ok(32) + Ok("james@example.com")
v.is_ok()                                       # True
name, age, email = v.into_result()

w = into_validated(Err("no name")) + Ok(32) + Err("no email")
w.is_err()                                      # True
try:
    w.into_result()
except ValidationError as exc:
    exc.errors                                  # ["no name", "no email"]

valid(1, 2) + invalid("bad")                    # invalid, errors ("bad",)
```

A valid `Validated` holds every collected value, in order, in `values`; an
invalid one holds every error, in order, in `errors`. `into_result()` returns
the tuple of values, or raises `ValidationError` carrying all the errors.
`Ok`, `Err` and other `Validated` objects can all be added to a `Validated`.

## Paths

```python
from monokit.path import path, Path, PathError

height = path("dimensions") + path("height")   # same as path("dimensions.height")
height.get(dog)                                 # 10
height.get(cat)                                 # 7
height.set(dog, 13)
height.get(dog)                                 # 13
str(height)                                     # "dimensions.height"
```

A path works on any object that has the named attributes, or mapping keys,
so one path serves many unrelated classes of the same shape. A missing field
raises `PathError` (a `LookupError`); `set` only replaces fields that already
exist and raises `PathError` for read-only targets. Field names must be
Python identifiers.

## What it does not do

monokit is a library only: it installs no command. Paths are checked when
they are followed, not ahead of time, so a path that does not fit an object
is reported by `PathError` at the moment of use.

## Running the tests

```
pip install -e ".[test]"
pytest
```