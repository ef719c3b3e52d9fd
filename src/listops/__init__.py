"""
The package ``listops`` provides small, generic helper functions over in-memory
sequences: splitting into chunks, deduplication, difference and intersection,
compaction of "empty" values, dropping from either end, filling, flattening,
and index search.

Functions that only *read* their input accept any :class:`Seq` and return new
lists; their results never share a container with the input.
:func:`uniq`, :func:`uniq_fast`, :func:`compact`, :func:`drop_start`, and
:func:`drop_end` modify the given list in place and return ``None``.

The hash-based functions come in pairs, e.g. :func:`uniq` and :func:`uniq_fast`.
The two members of a pair give identical results; they differ only in the
:class:`Hasher` behind their lookup sets. The default, :class:`StandardHasher`,
resists crafted collisions; :class:`FastHasher` does not, and should be used
only on trusted input. More strategies can be added with :func:`register_hasher`.

What counts as "empty" for :func:`compact` is decided per type by
:func:`is_empty`, which can be extended to new types via ``is_empty.register``.
"""

from __future__ import annotations

from ._emptiness import (
    SupportsIsEmpty,
    compact,
    is_absent,
    is_empty,
)
from ._filling import (
    fill_default,
    fill_value,
)
from ._hashing import (
    DEFAULT_HASHER,
    FastHasher,
    Hasher,
    LookupSet,
    StandardHasher,
    get_hasher,
    register_hasher,
    registered_hashers,
)
from ._search import (
    find_index,
    find_indexes,
    find_last_index,
)
from ._setops import (
    difference,
    difference_fast,
    intersection,
    uniq,
    uniq_fast,
)
from ._slicing import (
    chunk,
    drop_end,
    drop_start,
    flatten,
)
from ._util import (
    Element,
    InvalidArgument,
    Seq,
)

__version__ = '0.1.0'
