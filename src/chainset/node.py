import weakref

__all__ = []


class Node:
    """Single cell of the chain.

    `next` owns the following node; `previous` is a weak back-link used
    only to unlink in constant time.
    """

    __slots__ = ('value', 'next', '_previous', '__weakref__')

    def __init__(self, value, previous=None, following=None):
        self.value = value
        self.next = following
        self.previous = previous

    @property
    def previous(self):
        return self._previous() if self._previous is not None else None

    @previous.setter
    def previous(self, node):
        self._previous = weakref.ref(node) if node is not None else None

    def __repr__(self):
        return f'{self.__class__.__name__}({self.value!r})'
