from __future__ import annotations

import random

import pytest
from boltons import iterutils
from listops import InvalidArgument, chunk, drop_end, drop_start, flatten


def test_chunk():
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]
    assert chunk([1, 2, 3], 3) == [[1, 2, 3]]
    assert chunk([1, 2, 3], 10) == [[1, 2, 3]]
    assert chunk([1, 2, 3], 1) == [[1], [2], [3]]
    assert chunk([], 3) == []
    assert chunk((), 1) == []
    assert chunk('abcde', 2) == [['a', 'b'], ['c', 'd'], ['e']]
    assert chunk(range(7), 3) == [[0, 1, 2], [3, 4, 5], [6]]
    assert chunk((1, 2, 3), 2) == [[1, 2], [3]]


def test_chunk_invalid_size():
    for data in ([], [1, 2, 3]):
        with pytest.raises(InvalidArgument):
            chunk(data, 0)
        with pytest.raises(InvalidArgument):
            chunk(data, -2)
    with pytest.raises(ValueError):
        chunk([1], 0)


def test_chunk_no_aliasing():
    data = [[1], [2], [3]]
    z = chunk(data, 5)
    assert z == [data]
    assert z[0] is not data
    z[0].append(4)
    assert len(data) == 3

    z = chunk(data, 2)
    z[0].clear()
    assert data == [[1], [2], [3]]


def test_chunk_random():
    rand = random.Random(1)
    for _ in range(100):
        data = [rand.randint(0, 9) for _ in range(rand.randint(0, 40))]
        k = rand.randint(1, 12)
        z = chunk(data, k)
        assert z == iterutils.chunked(data, k)
        assert flatten(z) == data
        for c in z[:-1]:
            assert len(c) == k
        if z:
            assert 1 <= len(z[-1]) <= k


def test_flatten():
    assert flatten([[1, 2], [], [3]]) == [1, 2, 3]
    assert flatten([]) == []
    assert flatten([[], []]) == []
    assert flatten([[1, [2, 3]], [[4]]]) == [1, [2, 3], [4]]
    assert flatten(['ab', ('c',), range(2)]) == ['a', 'b', 'c', 0, 1]

    inner = [1, 2]
    z = flatten([inner])
    assert z == inner
    assert z is not inner


def test_drop_start():
    x = [1, 2, 3, 4, 5]
    assert drop_start(x, 2) is None
    assert x == [3, 4, 5]

    drop_start(x, 0)
    assert x == [3, 4, 5]

    drop_start(x, 3)
    assert x == []

    x = [1, 2, 3]
    drop_start(x, len(x) + 5)
    assert x == []

    x = []
    drop_start(x, 1)
    assert x == []

    with pytest.raises(InvalidArgument):
        drop_start([1, 2], -1)


def test_drop_end():
    x = [1, 2, 3, 4, 5]
    assert drop_end(x, 2) is None
    assert x == [1, 2, 3]

    drop_end(x, 0)
    assert x == [1, 2, 3]

    drop_end(x, 1)
    assert x == [1, 2]

    x = [1, 2, 3]
    drop_end(x, len(x) + 5)
    assert x == []

    x = [1, 2, 3]
    drop_end(x, 3)
    assert x == []

    with pytest.raises(InvalidArgument):
        drop_end([1, 2], -1)
