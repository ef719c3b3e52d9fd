from __future__ import annotations

from collections.abc import Callable, Iterator

from ._util import Element, Seq

Predicate = Callable[..., bool]
"""
Called as ``predicate(element)``, or ``predicate(element, index)``
if the search function is called with ``with_index=True``.
"""


def _matches(
    values: Seq[Element], predicate: Predicate, with_index: bool
) -> Iterator[int]:
    if with_index:
        for i, v in enumerate(values):
            if predicate(v, i):
                yield i
    else:
        for i, v in enumerate(values):
            if predicate(v):
                yield i


def find_index(
    values: Seq[Element], predicate: Predicate, *, with_index: bool = False
) -> int | None:
    """
    Return the position of the first element of ``values`` for which
    ``predicate`` holds, or ``None`` if there is no such element.

    >>> find_index([3, 8, 5, 8], lambda x: x > 4)
    1
    >>> find_index([3, 8], lambda x: x > 10) is None
    True
    """
    return next(_matches(values, predicate, with_index), None)


def find_indexes(
    values: Seq[Element], predicate: Predicate, *, with_index: bool = False
) -> list[int]:
    """
    Return the positions, in increasing order, of all elements of ``values``
    for which ``predicate`` holds.
    """
    return list(_matches(values, predicate, with_index))


def find_last_index(
    values: Seq[Element], predicate: Predicate, *, with_index: bool = False
) -> int | None:
    """
    Return the position of the last element of ``values`` for which
    ``predicate`` holds, or ``None`` if there is no such element.

    ``predicate`` is still called on the elements front to back.
    """
    last = None
    for last in _matches(values, predicate, with_index):
        pass
    return last
