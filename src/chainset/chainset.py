import copy
import logging
import operator
from collections.abc import Callable, Collection, Iterable, Iterator
from typing import Any, Generic, TypeVar

import more_itertools

from chainset.exception import DuplicateElement, ElementNotFound
from chainset.iterator import ConstIterator
from chainset.node import Node
from chainset.setutils import concatenate, render

logger = logging.getLogger(__name__)

__all__ = ['ChainSet']

T = TypeVar('T')


def _cursor_values(first, last):
    cursor = copy.copy(first)
    while cursor != last:
        yield cursor.value
        cursor.advance()


class ChainSet(Collection, Generic[T]):
    """A duplicate-free set that keeps insertion order on a doubly linked chain.

    Uniqueness is decided by an injected equality predicate rather than by
    hashing, so elements need not be hashable and every lookup is a linear
    scan of the chain.
    - `add` appends at the tail and raises `DuplicateElement` on a clash
    - `remove` unlinks in place and raises `ElementNotFound` when absent
    - indexing walks from the head

    Examples

    >>> s = ChainSet([5, 4, 23, -56, 1, -9])
    >>> s.add(5)
    Traceback (most recent call last):
     ...
    chainset.exception.DuplicateElement: element already present: 5
    >>> s[3]
    -56
    >>> s.remove(5)
    >>> s
    ChainSet([4, 23, -56, 1, -9])

    Case-insensitive strings:
    >>> names = ChainSet(equal=lambda a, b: a.lower() == b.lower())
    >>> names.add('Mario')
    >>> 'MARIO' in names
    True
    """

    def __init__(self, iterable: Iterable[T] = None,
                 equal: Callable[[T, T], bool] = None) -> None:
        """Initialize a ChainSet, optionally copying from an iterable.

        Elements are added one at a time in iteration order. If any add
        fails the nodes already linked are released and the original
        error is re-raised, so no partially filled set is ever produced.

        Parameters
            iterable: Optional source of elements, copied in order
            equal: Equality predicate; defaults to the source's predicate
                when copying a ChainSet, otherwise to `operator.eq`

        Raises
            DuplicateElement: If the source holds two equal elements
        """
        if equal is None:
            equal = iterable.equal if isinstance(iterable, ChainSet) else operator.eq
        self._head = None
        self._tail = None
        self._size = 0
        self._equal = equal
        self._version = 0
        if iterable is not None:
            self._populate(iterable)

    @classmethod
    def from_range(cls, first, last, equal: Callable[[T, T], bool] = None,
                   convert: Callable[[Any], T] = None) -> 'ChainSet[T]':
        """Build a ChainSet from a pair of forward cursors.

        Any cursor exposing `value`, `advance()` and equality works, such
        as the `ConstIterator` returned by `begin()` and `end()`. The
        caller's `first` cursor is left where it was. When no predicate is
        given and `first` belongs to a ChainSet, that set's predicate is used.

        >>> s = ChainSet(['Mario', 'Giovanni', 'Luca'])
        >>> ChainSet.from_range(s.begin(), s.end(), convert=str.upper)
        ChainSet(['MARIO', 'GIOVANNI', 'LUCA'])

        Parameters
            first: Cursor at the first element to copy
            last: Cursor one past the last element to copy
            equal: Equality predicate; defaults to the predicate of the set
                `first` was issued by, otherwise to `operator.eq`
            convert: Applied to every value before it is added

        Returns
            A new ChainSet holding the converted values in cursor order
        """
        if equal is None:
            owner = getattr(first, '_owner', None)
            equal = owner.equal if isinstance(owner, ChainSet) else operator.eq
        this = cls(equal=equal)
        values = _cursor_values(first, last)
        if convert is not None:
            values = map(convert, values)
        this._populate(values)
        return this

    def _populate(self, values: Iterable[Any]) -> None:
        try:
            for value in values:
                self.add(value)
        except BaseException:
            logger.debug(f'Releasing {self._size} elements after failed construction')
            self.clear()
            raise

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _search(self, value: T) -> Node | None:
        return more_itertools.first_true(self._nodes(), pred=lambda node: self._equal(node.value, value))

    @property
    def equal(self) -> Callable[[T, T], bool]:
        """Equality predicate used for uniqueness and search"""
        return self._equal

    def copy(self) -> 'ChainSet[T]':
        """Return a deep copy of the chain sharing the equality predicate"""
        return self.__class__(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'ChainSet[T]':
        """Fresh chain holding deep copies of the elements"""
        return self.__class__((copy.deepcopy(value, memo) for value in self), equal=self._equal)

    def __reduce__(self):
        return self.__class__, (list(self), self._equal)

    def assign(self, other: Iterable[T]) -> 'ChainSet[T]':
        """Replace the contents with a copy of `other`.

        The copy is built in full before anything is swapped in, so a
        failure leaves this set untouched.

        Parameters
            other: ChainSet (or any iterable) to copy from

        Returns
            This set
        """
        if other is self:
            return self
        equal = other.equal if isinstance(other, ChainSet) else self._equal
        tmp = self.__class__(other, equal=equal)
        self._head, tmp._head = tmp._head, self._head
        self._tail, tmp._tail = tmp._tail, self._tail
        self._size, tmp._size = tmp._size, self._size
        self._equal, tmp._equal = tmp._equal, self._equal
        self._version += 1
        tmp.clear()
        return self

    def add(self, value: T) -> None:
        """Append an element unless an equal one is already present.

        Parameters
            value: The element to add

        Raises
            DuplicateElement: If an equal element exists; the set is unchanged
        """
        if self._head is None:
            self._head = self._tail = Node(value)
        elif self._search(value) is None:
            node = Node(value, previous=self._tail)
            self._tail.next = node
            self._tail = node
        else:
            logger.debug(f'Rejected duplicate {value!r}')
            raise DuplicateElement(value)
        self._size += 1
        self._version += 1

    def remove(self, value: T) -> None:
        """Unlink the element equal to `value`.

        Parameters
            value: The element to remove

        Raises
            ElementNotFound: If no equal element exists; the set is unchanged
        """
        node = self._search(value)
        if node is None:
            logger.debug(f'Nothing to remove for {value!r}')
            raise ElementNotFound(value)
        previous, following = node.previous, node.next
        if previous is None:
            self._head = following
        else:
            previous.next = following
        if following is None:
            self._tail = previous
        else:
            following.previous = previous
        node.next = node.previous = None
        self._size -= 1
        self._version += 1

    def at(self, index: int) -> T:
        """Return the element at position `index` in insertion order.

        Only `0 <= index < size()` is accepted; negative indices are not
        supported.

        Raises
            IndexError: If the index is out of range
        """
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise IndexError(f'{self.__class__.__name__} index out of range: {index}')
        return more_itertools.nth(self._nodes(), index).value

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def clear(self) -> None:
        """Release every node. Clearing an empty set does nothing."""
        if self._head is None:
            return
        node = self._head
        while node is not None:
            node.next, node = None, node.next
        self._head = self._tail = None
        self._size = 0
        self._version += 1

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def begin(self) -> ConstIterator:
        """Cursor at the first element (equal to `end()` when empty)"""
        return ConstIterator(self, self._head)

    def end(self) -> ConstIterator:
        """Cursor one past the last element"""
        return ConstIterator(self, None)

    def __iter__(self) -> Iterator[T]:
        return self.begin()

    def __contains__(self, value: Any) -> bool:
        return self._search(value) is not None

    def __eq__(self, other: Any) -> bool:
        """Same length and pairwise equal in order, by this set's predicate"""
        if not isinstance(other, ChainSet):
            return NotImplemented
        return len(self) == len(other) and all(self._equal(a, b) for a, b in zip(self, other))

    __hash__ = None

    def __add__(self, other: 'ChainSet[T]') -> 'ChainSet[T]':
        if not isinstance(other, ChainSet):
            return NotImplemented
        return concatenate(self, other)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        if not self:
            return f'{self.__class__.__name__}()'
        return f'{self.__class__.__name__}({list(self)!r})'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
