from __future__ import annotations

import abc
import logging
import string
import zlib
from collections import UserString
from collections.abc import Hashable, Iterable, Iterator

from typing_extensions import Self

logger = logging.getLogger(__name__)


class Hasher(abc.ABC):
    """
    A hashing strategy that backs the lookup sets used by
    :func:`~listops.uniq`, :func:`~listops.difference` and friends.

    The only requirement on :meth:`digest` is the usual one for hashing:
    values that compare equal must produce equal digests.
    As long as that holds, :class:`LookupSet` gives the same membership under
    any strategy, because it compares candidates by equality within a digest
    bucket; the strategy decides only how values are spread over buckets.
    """

    @classmethod
    @abc.abstractmethod
    def digest(cls, x: Hashable) -> int:
        raise NotImplementedError


class StandardHasher(Hasher):
    """
    Uses the interpreter's built-in ``hash``.

    For ``str`` and ``bytes`` this is SipHash keyed with a per-process
    random seed (see ``PYTHONHASHSEED``), which makes it impractical for an
    outsider to construct many colliding keys.
    """

    @classmethod
    def digest(cls, x):
        return hash(x)


class FastHasher(Hasher):
    """
    Uses an unseeded CRC-32 for text and binary data, and built-in ``hash``
    for everything else.

    Text is ``str`` and ``collections.UserString``; binary data is ``bytes``
    and read-only ``memoryview``. Values of these types that compare equal
    get the same digest. A user class whose instances compare equal to
    ``str`` or ``bytes`` values must not be mixed with them under this hasher.

    .. warning:: CRC-32 is not resistant to adversarial input.
        Anyone who controls the data can produce arbitrarily many values with
        the same digest and degrade lookups to linear time.
        Use this only on trusted input.
        Digests are the same in every process, which is occasionally handy
        when reproducing a problem.
    """

    @classmethod
    def digest(cls, x):
        if isinstance(x, UserString):
            x = x.data
        if isinstance(x, str):
            return zlib.crc32(x.encode('utf-8', 'surrogatepass'))
        if isinstance(x, memoryview):
            # Raises for a writable view, like the built-in ``hash``.
            hash(x)
            x = x.tobytes()
        if isinstance(x, bytes):
            return zlib.crc32(x)
        return hash(x)


registered_hashers: dict[str, type[Hasher]] = {
    'standard': StandardHasher,
    'fast': FastHasher,
}

DEFAULT_HASHER = 'standard'


def register_hasher(name: str, hasher: type[Hasher]) -> None:
    """
    Register a new hashing strategy.

    Parameters
    ----------
    name
        Name to be associated with the new strategy. After registering
        a strategy with name "xyz", one can use ``hasher='xyz'`` in calls to
        :func:`~listops.uniq`, :func:`~listops.difference` and
        :func:`~listops.intersection`.
        Underscores are normalized to dashes.
    hasher
        A subclass of :class:`Hasher`.
    """
    good = string.ascii_letters + string.digits + '-_'
    if not name or not all(n in good for n in name):
        raise ValueError(f"invalid hasher name: '{name}'")
    name = name.replace('_', '-')
    if name in registered_hashers:
        raise ValueError(f"hasher '{name}' is already registered")
    registered_hashers[name] = hasher
    logger.debug("registered hasher '%s': %r", name, hasher)


def get_hasher(hasher: str | type[Hasher] | None = None) -> type[Hasher]:
    """
    Resolve ``hasher``, which is a registered name, a :class:`Hasher` subclass,
    or ``None`` for :data:`DEFAULT_HASHER`.
    """
    if hasher is None:
        hasher = DEFAULT_HASHER
    if isinstance(hasher, str):
        try:
            return registered_hashers[hasher.replace('_', '-')]
        except KeyError:
            raise ValueError(f"invalid value of `hasher`: '{hasher}'") from None
    if isinstance(hasher, type) and issubclass(hasher, Hasher):
        return hasher
    raise TypeError(f'expecting a hasher name or a Hasher subclass; got {hasher!r}')


class LookupSet:
    """
    A set of hashable values whose bucketing is controlled by a :class:`Hasher`.

    Values are kept in a dict keyed by digest; each bucket is a list of the
    distinct values sharing that digest. Membership is decided by ``==``
    within the bucket, so, as with the built-in ``set``, ``1``, ``1.0`` and
    ``True`` are a single member.

    Iteration yields members in insertion order.
    """

    def __init__(self, hasher: str | type[Hasher] | None = None):
        self._digest = get_hasher(hasher).digest
        self._buckets: dict[int, list] = {}
        self._members: list = []

    @classmethod
    def from_iterables(
        cls, *iterables: Iterable, hasher: str | type[Hasher] | None = None
    ) -> Self:
        """
        Create a ``LookupSet`` holding every value of every one of ``iterables``.
        """
        z = cls(hasher)
        for values in iterables:
            z.update(values)
        return z

    def __repr__(self):
        return f'<{self.__class__.__name__} with {len(self._members)} members>'

    def __str__(self):
        return self.__repr__()

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, x) -> bool:
        bucket = self._buckets.get(self._digest(x))
        if bucket is None:
            return False
        # Identity first, like the built-in set, so that a NaN is found.
        return any(v is x or v == x for v in bucket)

    def __iter__(self) -> Iterator:
        yield from self._members

    def add(self, x) -> bool:
        """
        Add ``x`` to the set. Return ``True`` if ``x`` was not already a member.
        """
        key = self._digest(x)
        bucket = self._buckets.get(key)
        if bucket is None:
            self._buckets[key] = [x]
        elif any(v is x or v == x for v in bucket):
            return False
        else:
            bucket.append(x)
        self._members.append(x)
        return True

    def update(self, values: Iterable) -> None:
        for x in values:
            self.add(x)
