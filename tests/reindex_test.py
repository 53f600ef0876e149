import pytest
from immutables import Map

from parray._reindex import shift_after


def _mutation(elements):
    return Map(enumerate(elements)).mutate()


def _elements(mutation):
    contents = mutation.finish()
    assert set(contents.keys()) == set(range(len(contents)))
    return [contents[p] for p in range(len(contents))]


def test_shift_up_moves_positions_from_pivot():
    mutation = shift_after(_mutation(['a', 'b', 'c']), 1, 1)
    mutation[1] = 'x'

    assert _elements(mutation) == ['a', 'x', 'b', 'c']


def test_shift_up_at_end_only_makes_room():
    mutation = shift_after(_mutation(['a', 'b']), 2, 1)
    mutation[2] = 'x'

    assert _elements(mutation) == ['a', 'b', 'x']


def test_shift_up_at_start():
    mutation = shift_after(_mutation(['a', 'b']), 0, 1)
    mutation[0] = 'x'

    assert _elements(mutation) == ['x', 'a', 'b']


def test_shift_down_closes_gap():
    mutation = shift_after(_mutation(['a', 'b', 'c', 'd']), 1, -1)

    assert _elements(mutation) == ['a', 'c', 'd']


def test_shift_down_on_last_position_drops_it():
    mutation = shift_after(_mutation(['a', 'b', 'c']), 2, -1)

    assert _elements(mutation) == ['a', 'b']


def test_shift_does_not_touch_source_map():
    source = Map(enumerate(['a', 'b', 'c']))
    shift_after(source.mutate(), 0, -1).finish()

    assert [source[p] for p in range(3)] == ['a', 'b', 'c']


def test_invalid_direction():
    with pytest.raises(ValueError):
        shift_after(_mutation(['a']), 0, 0)
