import pytest
from fntransduce import transduce, conj_r, sum_r, map_t, grep_t, take_t, identity_t
from fntransduce.compose import comp


def inc(x):
    return x + 1

def even(x):
    return x % 2 == 0

def times10(x):
    return x * 10


one2five = [1, 2, 3, 4, 5]

def test_comp_single_is_identity():
    t = map_t(inc)
    assert comp(t) is t

def test_comp_empty():
    assert comp() is identity_t
    assert transduce(comp(), conj_r, [], one2five) == one2five

def test_comp_order():
    assert transduce(comp(grep_t(even), map_t(inc)), conj_r, [], one2five) == [3, 5]
    assert transduce(comp(map_t(inc), grep_t(even)), conj_r, [], one2five) == [2, 4, 6]

def test_comp_many_stages():
    xform = comp(grep_t(even),
                 map_t(inc),
                 map_t(inc),
                 grep_t(even),
                 grep_t(even),
                 map_t(inc))
    assert transduce(xform, conj_r, [], one2five) == [5, 7]

def test_comp_nested():
    nested = comp(comp(grep_t(even), map_t(inc)), comp(map_t(inc), grep_t(even)), map_t(times10))
    flat = comp(grep_t(even), map_t(inc), map_t(inc), grep_t(even), map_t(times10))
    assert transduce(nested, conj_r, [], one2five) == [40, 60]
    assert transduce(flat, conj_r, [], one2five) == [40, 60]

def test_comp_associative():
    a, b, c = map_t(inc), grep_t(even), map_t(times10)
    expected = [20, 40, 60]
    assert transduce(comp(comp(a, b), c), conj_r, [], one2five) == expected
    assert transduce(comp(a, comp(b, c)), conj_r, [], one2five) == expected
    assert transduce(comp(a, b, c), conj_r, [], one2five) == expected

def test_comp_is_reusable():
    xform = comp(map_t(inc), take_t(2))
    assert transduce(xform, conj_r, [], one2five) == [2, 3]
    assert transduce(xform, sum_r, 0, one2five) == 5

def test_comp_rejects_non_transducers():
    with pytest.raises(TypeError):
        comp(map_t(inc), 3)

def test_comp_readme_example():
    xform = comp(map_t(inc), grep_t(even), map_t(lambda x: x * 2))
    assert transduce(xform, sum_r, 0, range(1, 11)) == 60
