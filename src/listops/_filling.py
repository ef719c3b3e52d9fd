from __future__ import annotations

import copy
from collections.abc import Callable

from ._util import Element, check_count


def fill_default(count: int, factory: Callable[[], Element]) -> list[Element]:
    """
    Return a list of ``count`` default values, each created by calling ``factory``.

    ``factory`` is usually a type, e.g. ``int`` for zeros, ``str`` for empty
    strings, or ``list`` for independent empty lists.

    >>> fill_default(3, int)
    [0, 0, 0]
    """
    check_count('count', count)
    return [factory() for _ in range(count)]


def fill_value(count: int, value: Element) -> list[Element]:
    """
    Return a list of ``count`` copies of ``value``.

    Each slot holds its own deep copy, so mutating one element
    does not affect the others.

    >>> fill_value(2, 'ab')
    ['ab', 'ab']
    """
    check_count('count', count)
    return [copy.deepcopy(value) for _ in range(count)]
