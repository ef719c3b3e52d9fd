from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

Element = TypeVar('Element')
"""
This type variable is used to annotate the type of a data element.
"""


@runtime_checkable
class Seq(Protocol[Element]):
    """
    The protocol ``Seq`` is simpler and broader than the standard ``collections.abc.Sequence``.
    It requires only ``__len__``, ``__getitem__``, and ``__iter__``.

    Functions in this package that only *read* their input accept any ``Seq``,
    so that ``list``, ``tuple``, ``str``, ``range``, and user classes that
    provide these three methods can all be passed in:

    >>> from listops import Seq
    >>> from collections.abc import Sequence
    >>> issubclass(Sequence, Seq)
    True

    Functions that modify their input in place take a ``list``.

    The type parameter ``Element`` indicates the type of each data element.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Element: ...

    def __iter__(self) -> Iterator[Element]:
        for i in range(self.__len__()):
            yield self[i]


class InvalidArgument(ValueError):
    """
    Raised when a size or count argument is outside its valid range,
    e.g. a chunk size of zero.
    """


def check_count(name: str, value: int) -> int:
    if value < 0:
        raise InvalidArgument(f'`{name}` must be non-negative; got {value}')
    return value
