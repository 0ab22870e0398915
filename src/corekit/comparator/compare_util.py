"""
Comparison helpers.

A comparator is any callable taking two values and returning a negative
number, zero or a positive number. Hand one to `sorted`/`list.sort` through
`functools.cmp_to_key`:

    sorted(users, key=cmp_to_key(comparing_indexed(lambda u: u.role, roles)))

Every function here is stateless, and the comparators they build can be
shared freely between threads.
"""
from __future__ import annotations

from collections.abc import Set as AbstractSet
from numbers import Real
from typing import Any, Callable, Iterable, Optional, TypeVar

from .indexed_comparator import IndexedComparator
from .pinyin_comparator import PinyinComparator

T = TypeVar("T")
U = TypeVar("U")

Comparator = Callable[[T, T], int]


def _is_nan(x: Any) -> bool:
    return isinstance(x, float) and x != x


def _sign(a: Any, b: Any) -> int:
    # NaN sorts after every other real number and equals itself
    a_nan, b_nan = _is_nan(a), _is_nan(b)
    if (a_nan or b_nan) and isinstance(a, Real) and isinstance(b, Real):
        return a_nan - b_nan
    return (a > b) - (a < b)


def _require_callable(key_extractor: Any) -> None:
    if not callable(key_extractor):
        raise TypeError(f"key_extractor must be callable, got {key_extractor!r}")


# ------------------------------------------------------------------ factories

def natural() -> Comparator:
    """Comparator using the values' own ordering. Unorderable values raise TypeError."""
    return _sign


def natural_reverse() -> Comparator:
    return lambda a, b: _sign(b, a)


def reverse(comparator: Optional[Comparator] = None) -> Comparator:
    if comparator is None:
        return natural_reverse()
    return lambda a, b: comparator(b, a)


def comparing_pinyin(key_extractor: Callable[[T], str], reverse: bool = False) -> Comparator:
    """
    Comparator ordering elements by the pinyin reading of the string that
    `key_extractor` pulls out of them.
    """
    _require_callable(key_extractor)
    pinyin_comparator = PinyinComparator()
    if reverse:
        return lambda o1, o2: pinyin_comparator(key_extractor(o2), key_extractor(o1))
    return lambda o1, o2: pinyin_comparator(key_extractor(o1), key_extractor(o2))


def comparing_indexed(
        key_extractor: Callable[[T], U],
        objs: Iterable[U],
        *,
        at_end_if_miss: bool = False) -> Comparator:
    """
    Comparator ordering elements by where `key_extractor(element)` sits in
    `objs`.

    Keys missing from `objs` sort before all present keys, or after them when
    `at_end_if_miss` is true. Two missing keys compare equal, so their
    relative order is whatever the (stable) sort keeps.

    Example, with `objs=[3, 2, 1, 4]`: keys 1, 2, 3, 4 sort as 3, 2, 1, 4 and
    a key of 9 sorts first.
    """
    _require_callable(key_extractor)
    indexed_comparator = IndexedComparator(*objs, at_end_if_miss=at_end_if_miss)
    return lambda o1, o2: indexed_comparator(key_extractor(o1), key_extractor(o2))


# ------------------------------------------------------------------ compare

def compare(
        c1: Any,
        c2: Any,
        comparator: Optional[Comparator] = None,
        *,
        null_greater: bool = False) -> int:
    """
    Compare two values.

    With a `comparator` the result is simply `comparator(c1, c2)`, and the
    comparator is responsible for any None handling.

    Without one the comparison is None-safe: None sorts before every other
    value, or after it when `null_greater` is true, and two non-None values
    are compared by their own ordering (TypeError if they have none).
    """
    if comparator is not None:
        return comparator(c1, c2)
    if c1 is c2:
        return 0
    if c1 is None:
        return 1 if null_greater else -1
    if c2 is None:
        return -1 if null_greater else 1
    return _sign(c1, c2)


def _orderable(o1: Any, o2: Any) -> bool:
    if isinstance(o1, Real) and isinstance(o2, Real):
        return True
    # set "<" is a subset test, not an ordering
    if isinstance(o1, AbstractSet) or isinstance(o2, AbstractSet):
        return False
    if isinstance(o2, type(o1)):
        base = type(o1)
    elif isinstance(o1, type(o2)):
        base = type(o2)
    else:
        return False
    # types without an ordering answer NotImplemented (object, dict, ...)
    return base.__lt__(o1, o2) is not NotImplemented


def _hash_or_id(o: Any) -> int:
    try:
        return hash(o)
    except TypeError:
        # unhashable type, or a hashable container holding unhashable values
        return id(o)


def compare_objects(o1: Any, o2: Any, *, null_greater: bool = False) -> int:
    """
    Compare two arbitrary objects, falling back step by step:

    1. the same object compares 0
    2. None sorts first (or last with `null_greater`)
    3. values of one orderable type (or two real numbers) use their ordering;
       sets never do, since their "<" is a subset test
    4. equal values compare 0
    5. otherwise hash values are compared (`id()` for unhashable objects)
    6. equal hashes are settled by comparing `str()` forms

    Steps 5 and 6 give an order that is consistent for the life of the
    process only: string hashes are salted per process and identity hashes
    depend on memory addresses, so do not persist results that rely on it.
    """
    if o1 is o2:
        return 0
    if o1 is None:
        return 1 if null_greater else -1
    if o2 is None:
        return -1 if null_greater else 1

    if _orderable(o1, o2):
        return _sign(o1, o2)

    if o1 == o2:
        return 0

    result = _sign(_hash_or_id(o1), _hash_or_id(o2))
    if result == 0:
        result = _sign(str(o1), str(o2))
    return result


# ------------------------------------------------------------------ derived

def min(t1: T, t2: T) -> T:
    """Smaller of two values, None-safe. Ties return `t1`."""
    return t1 if compare(t1, t2) <= 0 else t2


def max(t1: T, t2: T) -> T:
    """Larger of two values, None-safe. Ties return `t1`."""
    return t1 if compare(t1, t2) >= 0 else t2


def equals(c1: Any, c2: Any) -> bool:
    return compare(c1, c2) == 0


def gt(c1: Any, c2: Any) -> bool:
    return compare(c1, c2) > 0


def ge(c1: Any, c2: Any) -> bool:
    return compare(c1, c2) >= 0


def lt(c1: Any, c2: Any) -> bool:
    return compare(c1, c2) < 0


def le(c1: Any, c2: Any) -> bool:
    return compare(c1, c2) <= 0


def is_in(value: T, c1: T, c2: T) -> bool:
    """True when `value` lies between `c1` and `c2`, bounds included, in either order."""
    return ge(value, min(c1, c2)) and le(value, max(c1, c2))


def is_in_exclusive(value: T, c1: T, c2: T) -> bool:
    return gt(value, min(c1, c2)) and lt(value, max(c1, c2))
