from __future__ import annotations

import logging
from collections.abc import Iterable

from ._util import Element, InvalidArgument, Seq, check_count

logger = logging.getLogger(__name__)


def chunk(values: Seq[Element], chunk_size: int) -> list[list[Element]]:
    """
    Split ``values`` into consecutive chunks of ``chunk_size`` elements.

    The last chunk holds whatever remains, between 1 and ``chunk_size`` elements.
    Every chunk is a new list; ``values`` is not modified.

    >>> chunk([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]

    Parameters
    ----------
    values
        The sequence to be split. An empty sequence gives ``[]``.
    chunk_size
        Max number of elements in each chunk. If it is not less than the
        length of ``values``, the result is a single chunk.

    Raises
    ------
    InvalidArgument
        If ``chunk_size`` is not positive.
    """
    if chunk_size <= 0:
        raise InvalidArgument(f'`chunk_size` must be greater than 0; got {chunk_size}')
    n = len(values)
    if n == 0:
        return []
    if chunk_size >= n:
        return [list(values)]
    logger.debug('splitting %d elements into chunks of %d', n, chunk_size)
    if isinstance(values, (list, tuple, range, str)):
        return [list(values[i : i + chunk_size]) for i in range(0, n, chunk_size)]
    # A general ``Seq`` is not required to support slices.
    return [
        [values[j] for j in range(i, min(i + chunk_size, n))]
        for i in range(0, n, chunk_size)
    ]


def flatten(nested: Iterable[Iterable[Element]]) -> list[Element]:
    """
    Concatenate the member sequences of ``nested``, in order, into a new list.

    Only one level is removed; members of the member sequences are not
    looked into.

    >>> flatten([[1, 2], [], [3], [[4, 5]]])
    [1, 2, 3, [4, 5]]
    """
    return [v for member in nested for v in member]


def drop_start(values: list, n: int) -> None:
    """
    Remove the first ``n`` elements of ``values`` in place.
    If ``n`` is not less than the length of ``values``, all elements are removed.
    """
    check_count('n', n)
    if n:
        del values[:n]


def drop_end(values: list, n: int) -> None:
    """
    Remove the last ``n`` elements of ``values`` in place.
    If ``n`` is not less than the length of ``values``, all elements are removed.
    """
    check_count('n', n)
    if n:
        del values[max(len(values) - n, 0) :]
