from __future__ import annotations

import pytest
from listops import InvalidArgument, fill_default, fill_value


def test_fill_default():
    assert fill_default(3, int) == [0, 0, 0]
    assert fill_default(2, str) == ['', '']
    assert fill_default(2, float) == [0.0, 0.0]
    assert fill_default(0, int) == []

    z = fill_default(3, list)
    assert z == [[], [], []]
    z[0].append(1)
    assert z == [[1], [], []]

    with pytest.raises(InvalidArgument):
        fill_default(-1, int)


def test_fill_value():
    x = object()
    z = fill_value(5, 'x')
    assert len(z) == 5
    assert all(v == 'x' for v in z)
    assert fill_value(0, x) == []

    value = {'a': [1]}
    z = fill_value(3, value)
    assert z == [value] * 3
    z[0]['a'].append(2)
    assert z[1] == {'a': [1]}
    assert value == {'a': [1]}

    with pytest.raises(InvalidArgument):
        fill_value(-3, 1)
