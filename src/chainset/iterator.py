import logging

from chainset import config

logger = logging.getLogger(__name__)

__all__ = ['ConstIterator']


class ConstIterator:
    """Read-only forward cursor over the chain of a `ChainSet`.

    A cursor is either positioned at a node or at the end (no node). It
    never owns nodes and offers no way to change the element it
    references.

    Any structural change to the owning set (add, remove, clear, assign)
    invalidates every cursor issued before it. With
    `config.iteration.checked` on, touching a stale cursor raises
    `RuntimeError`; otherwise the result is unspecified.

    >>> from chainset import ChainSet
    >>> s = ChainSet([5, 4, 23])
    >>> it = s.begin()
    >>> it.value
    5
    >>> it.advance().value
    4
    >>> it.post_advance().value
    4
    >>> it.value
    23
    >>> it.advance() == s.end()
    True
    """

    __slots__ = ('_owner', '_node', '_version')

    def __init__(self, owner=None, node=None):
        self._owner = owner
        self._node = node
        self._version = owner._version if owner is not None else None

    def _check(self):
        if self._owner is None or not config.iteration.checked:
            return
        if self._version != self._owner._version:
            raise RuntimeError('ChainSet changed after this cursor was issued')

    @property
    def value(self):
        """Element referenced by the cursor"""
        self._check()
        if self._node is None:
            raise ValueError('Cannot dereference an end cursor')
        return self._node.value

    def advance(self):
        """Move to the next node in place and return the cursor"""
        self._check()
        if self._node is None:
            raise ValueError('Cannot advance an end cursor')
        self._node = self._node.next
        return self

    def post_advance(self):
        """Move to the next node in place and return a copy of the prior position"""
        prior = self.copy()
        self.advance()
        return prior

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other._owner = self._owner
        other._node = self._node
        other._version = self._version
        return other

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, ConstIterator):
            return NotImplemented
        return self._node is other._node

    __hash__ = None

    def __iter__(self):
        return self

    def __next__(self):
        self._check()
        if self._node is None:
            raise StopIteration
        value = self._node.value
        self._node = self._node.next
        return value

    def __repr__(self):
        if self._node is None:
            return f'{self.__class__.__name__}(end)'
        return f'{self.__class__.__name__}({self._node.value!r})'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
