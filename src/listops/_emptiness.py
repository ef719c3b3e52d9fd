from __future__ import annotations

import functools
import numbers
from collections.abc import Callable, Sized
from typing import Protocol, runtime_checkable

from ._util import Element


@runtime_checkable
class SupportsIsEmpty(Protocol):
    """
    A class that knows whether its instances are "empty".
    Instances of such a class can be passed to :func:`is_empty`
    without registering the class.
    """

    def is_empty(self) -> bool: ...


@functools.singledispatch
def is_empty(value) -> bool:
    """
    Tell whether ``value`` counts as "empty" for its type.

    Out of the box, this is defined for

    - ``None``, the absent optional value: always empty;
    - ``bool``: ``False`` is empty;
    - every number (``int``, ``float``, ``complex``, ``Decimal``, ``Fraction``,
      and anything registered with the :mod:`numbers` ABCs): zero is empty,
      including ``-0.0``; NaN is not;
    - ``str``, ``bytes``, and every sized container: empty if its length is 0;
    - any object that implements :class:`SupportsIsEmpty`; for a sized
      container, its own ``is_empty()`` takes priority over its length.

    For any other type, ``TypeError`` is raised. Define emptiness for a new type
    by registering an implementation::

        @is_empty.register
        def _(value: Money) -> bool:
            return value.cents == 0

    The predicate must depend on the value alone.
    """
    if isinstance(value, SupportsIsEmpty):
        return value.is_empty()
    raise TypeError(f'emptiness is not defined for type {type(value).__name__!r}')


@is_empty.register(type(None))
def _(value) -> bool:
    return True


@is_empty.register
def _(value: bool) -> bool:
    return not value


@is_empty.register
def _(value: numbers.Number) -> bool:
    return value == 0


@is_empty.register
def _(value: Sized) -> bool:
    if isinstance(value, SupportsIsEmpty):
        return value.is_empty()
    return len(value) == 0


def is_absent(value) -> bool:
    """
    The emptiness of an optional value: ``None`` is empty, and a present value
    is never empty, whatever it is.

    Pass this to :func:`compact` to drop only the missing entries, keeping,
    say, ``0`` and ``''``.
    """
    return value is None


def compact(
    values: list[Element],
    is_empty: Callable[[Element], bool] = is_empty,
) -> None:
    """
    Remove, in place, every element of ``values`` that is empty according to
    ``is_empty``. The remaining elements keep their relative order.

    >>> x = [1, 0, 2, 0, 3]
    >>> compact(x)
    >>> x
    [1, 2, 3]
    >>> y = [0, None, '', None, 5]
    >>> compact(y, is_absent)
    >>> y
    [0, '', 5]
    """
    values[:] = [v for v in values if not is_empty(v)]
