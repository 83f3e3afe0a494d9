"""Free functions over ChainSet, written against its public add and
iteration surface only.
"""
import logging

from chainset import config
from chainset.exception import DuplicateElement

logger = logging.getLogger(__name__)

__all__ = [
    'concatenate',
    'filter_out',
    'render',
    'write',
    ]


def render(data_set):
    """Text of every element, each followed by the separator

    The separator is written after the last element too.

    >>> from chainset import ChainSet
    >>> render(ChainSet([5, 4, 23]))
    '5 4 23 '
    >>> render(ChainSet())
    ''
    """
    separator = config.render.separator
    return ''.join(f'{value}{separator}' for value in data_set)


def write(stream, data_set):
    """Write the rendered set to a text stream and return the stream

    >>> import io
    >>> from chainset import ChainSet
    >>> write(io.StringIO(), ChainSet(['Mario', 'Luca'])).getvalue()
    'Mario Luca '
    """
    stream.write(render(data_set))
    return stream


def filter_out(data_set, predicate):
    """New set holding, in order, the elements for which `predicate` is false

    >>> from chainset import ChainSet
    >>> filter_out(ChainSet([5, 4, 23, -56, 1, -9]), lambda x: x % 2 != 0)
    ChainSet([4, -56])
    """
    filtered = data_set.__class__(equal=data_set.equal)
    for value in data_set:
        if not predicate(value):
            filtered.add(value)
    return filtered


def concatenate(first, second):
    """Copy of `first` followed by every element of `second`

    Elements of `second` are added in order and the first one equal to
    an element already in the result raises `DuplicateElement`. Nothing
    added before the clash is rolled back; the partial result is simply
    never returned.

    >>> from chainset import ChainSet
    >>> concatenate(ChainSet([1010, -999, 0]), ChainSet([5, 4]))
    ChainSet([1010, -999, 0, 5, 4])
    >>> concatenate(ChainSet([1, 2]), ChainSet([3, 1]))
    Traceback (most recent call last):
     ...
    chainset.exception.DuplicateElement: element already present: 1
    """
    concat = first.copy()
    for value in second:
        try:
            concat.add(value)
        except DuplicateElement:
            logger.debug(f'Concatenation stopped at {value!r} with {len(concat)} elements merged')
            raise
    return concat


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
