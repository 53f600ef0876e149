"""
Hypothesis-based tests for parray.
"""
from hypothesis import given, strategies as st

from parray import parray, Success, Cont, Halt, Done, Halted


Lists = st.lists(st.integers())
PArrays = Lists.map(parray)


@st.composite
def arrays_with_index(draw, insertion=False):
    "generate a non-empty list and a valid signed index into it"
    l = draw(st.lists(st.integers(), min_size=0 if insertion else 1))
    upper = len(l) if insertion else len(l) - 1
    position = draw(st.integers(0, upper))
    index = draw(st.sampled_from([position, position - len(l)])) if position < len(l) else position
    return l, index


@given(Lists)
def test_roundtrip_list(l):
    assert parray(l).tolist() == l
    assert list(parray(l)) == l


@given(PArrays)
def test_reconstruction(p):
    assert parray(p.tolist()) == p


@given(Lists)
def test_construction_is_repeated_add(l):
    p = parray()
    for x in l:
        p = p.add(x)

    assert p == parray(l)


@given(arrays_with_index(), st.integers())
def test_get_after_set(data, value):
    l, index = data
    p = parray(l)
    assert p.set_or_raise(index, value).get(index) == Success(value)


@given(Lists)
def test_negative_index_equivalence(l):
    p = parray(l)
    for k in range(1, len(l) + 1):
        assert p.get(-k) == p.get(len(l) - k)


@given(arrays_with_index(insertion=True), st.integers())
def test_add_at_then_remove_at_is_identity(data, value):
    l, index = data
    position = index if index >= 0 else len(l) + index
    p = parray(l)
    assert p.add_at_or_raise(position, value).remove_at(position) == Success(p)


@given(arrays_with_index(insertion=True), st.integers())
def test_add_at_matches_list_insert(data, value):
    l, index = data
    expected = list(l)
    expected.insert(index if index >= 0 else len(l) + index, value)

    assert parray(l).add_at_or_raise(index, value).tolist() == expected


@given(arrays_with_index())
def test_remove_at_matches_list_delete(data):
    l, index = data
    expected = list(l)
    del expected[index]

    assert parray(l).remove_at_or_raise(index).tolist() == expected


@given(PArrays, st.integers())
def test_add_then_remove_is_identity(p, value):
    assert p.add(value).remove() == p


@given(PArrays)
def test_boundaries(p):
    assert not p.get(len(p)).is_success
    assert p.add_at(len(p), 0).is_success
    assert not p.remove_at(len(p)).is_success


@given(Lists, arrays_with_index(insertion=True), st.integers())
def test_updates_leave_input_unchanged(other, data, value):
    l, index = data
    p = parray(l)

    p.add(value)
    p.add_at(index, value)
    p.remove()
    p.into(other)
    if l:
        p.set(index % len(l), value)
        p.remove_at(index % len(l))

    assert p.tolist() == l


@given(Lists, st.integers(0, 20), st.integers(1, 5), st.integers(-20, 20))
def test_slice_matches_list_slicing(l, count, step, start):
    p = parray(l)
    normalized = max(len(l) + start, 0) if start < 0 else start
    assert p.slice(start, count, step) == l[normalized::step][:count]


@given(Lists, st.integers(0, 20))
def test_reduce_halt_sees_prefix(l, n):
    def step(x, acc):
        acc = acc + [x]
        return Halt(acc) if len(acc) == n else Cont(acc)

    result = parray(l).reduce(Cont([]), step)
    if 0 < n <= len(l):
        assert result == Halted(l[:n])
    else:
        assert result == Done(l)


@given(Lists)
def test_collect_preserves_order(l):
    assert parray().into(l).tolist() == l
