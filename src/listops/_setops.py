from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable

from ._hashing import FastHasher, Hasher, LookupSet
from ._util import Seq

logger = logging.getLogger(__name__)


def uniq(values: list[Hashable], *, hasher: str | type[Hasher] | None = None) -> None:
    """
    Remove duplicate elements of ``values`` in place, keeping the first
    occurrence of each distinct value. The retained elements keep their
    relative order.

    >>> x = [1, 2, 2, 3, 1]
    >>> uniq(x)
    >>> x
    [1, 2, 3]

    Parameters
    ----------
    values
        A list of hashable elements.
    hasher
        Name of a registered hashing strategy, or a :class:`~listops.Hasher`
        subclass. Defaults to :data:`~listops.DEFAULT_HASHER`.
        See :func:`uniq_fast`.
    """
    seen = LookupSet(hasher)
    values[:] = [v for v in values if seen.add(v)]


def uniq_fast(values: list[Hashable]) -> None:
    """
    Same as :func:`uniq`, but hashing with :class:`~listops.FastHasher`.

    .. warning:: The fast hasher is not resistant to adversarial input.
        Do not use this on data that an outsider can shape.
    """
    uniq(values, hasher=FastHasher)


def difference(
    base: Seq[Hashable],
    *others: Iterable[Hashable],
    hasher: str | type[Hasher] | None = None,
) -> list:
    """
    Return the elements of ``base``, in their original order, that do not
    appear in any of ``others``.

    This is a filter, not a dedup: an element that occurs several times in
    ``base`` and is not excluded occurs as many times in the result.
    With no ``others``, the result is a copy of ``base``.

    >>> difference([1, 2, 3, 4], [2, 4], [5])
    [1, 3]

    Parameters
    ----------
    base
        Elements to be filtered.
    *others
        Exclusion sequences. An element excluded by any one of them is dropped.
    hasher
        Hashing strategy for the lookup set built from ``others``; see :func:`uniq`.
    """
    excluded = LookupSet.from_iterables(*others, hasher=hasher)
    logger.debug(
        'filtering %d elements against %d excluded values', len(base), len(excluded)
    )
    return [v for v in base if v not in excluded]


def difference_fast(base: Seq[Hashable], *others: Iterable[Hashable]) -> list:
    """
    Same as :func:`difference`, but hashing with :class:`~listops.FastHasher`.

    .. warning:: The fast hasher is not resistant to adversarial input.
        Do not use this on data that an outsider can shape.
    """
    return difference(base, *others, hasher=FastHasher)


def intersection(
    *sequences: Iterable[Hashable], hasher: str | type[Hasher] | None = None
) -> list:
    """
    Return the distinct values that appear in every one of ``sequences``,
    in the order of their first occurrence in the first sequence.

    Repeats within a single sequence count once.
    With no ``sequences``, the result is empty.

    >>> intersection([3, 1, 2, 1], [1, 3], [0, 3, 1, 1])
    [3, 1]
    """
    if not sequences:
        return []
    common = LookupSet.from_iterables(sequences[0], hasher=hasher)
    for values in sequences[1:]:
        if not common:
            break
        present = LookupSet.from_iterables(values, hasher=hasher)
        survivors = LookupSet(hasher)
        survivors.update(v for v in common if v in present)
        common = survivors
    return list(common)
