import logging

logger = logging.getLogger(__name__)

__all__ = ['ChainSetError', 'DuplicateElement', 'ElementNotFound']


class ChainSetError(Exception):
    """Base class for recoverable container errors"""

    def __init__(self, value=None):
        self.value = value
        super().__init__(value)


class DuplicateElement(ChainSetError):
    """Raised when adding an element equal to one already present

    >>> raise DuplicateElement(5)
    Traceback (most recent call last):
     ...
    chainset.exception.DuplicateElement: element already present: 5
    """

    def __str__(self):
        return f'element already present: {self.value!r}'


class ElementNotFound(ChainSetError, KeyError):
    """Raised when removing an element that is not present

    Also a `KeyError`, so callers that treat the set as a mapping of
    its elements can catch it the usual way.

    >>> raise ElementNotFound('Piero')
    Traceback (most recent call last):
     ...
    chainset.exception.ElementNotFound: element not found: 'Piero'
    """

    def __str__(self):
        return f'element not found: {self.value!r}'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
