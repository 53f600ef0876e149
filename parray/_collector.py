import logging
from types import GenericAlias

logger = logging.getLogger(__name__)


class _Aborted(object):
    __slots__ = ()

    def __repr__(self):
        return 'ABORTED'


ABORTED = _Aborted()


class Collector(object):
    """
    Builds a PArray from elements streamed in by an external producer. Elements end up
    in the order they arrived in, after the elements of the array the collector started from.

    >>> from parray import parray
    >>> c = parray().collector()
    >>> c.element(1).element(2).done()
    parray([1, 2])
    >>> parray([1]).collector().element(2).abort()
    ABORTED
    """
    __slots__ = ('_array', '_closed')

    def __init__(self, array):
        self._array = array
        self._closed = False

    __class_getitem__ = classmethod(GenericAlias)

    def _check_open(self):
        if self._closed:
            raise ValueError('Collector has already been completed or aborted')

    def element(self, value):
        self._check_open()
        self._array = self._array.add(value)
        return self

    def done(self):
        self._check_open()
        self._closed = True
        return self._array

    def abort(self):
        self._check_open()
        logger.debug('Collector aborted after collecting %d elements', len(self._array))
        self._closed = True
        self._array = None
        return ABORTED

    def __repr__(self):
        state = 'closed' if self._closed else repr(self._array)
        return 'Collector({0})'.format(state)


def collect_into(array, iterable):
    """
    Stream iterable into a collector seeded with array. If the iterable fails the
    collection is aborted and the error propagates.
    """
    collector = Collector(array)
    try:
        for value in iterable:
            collector.element(value)
    except Exception:
        collector.abort()
        raise

    return collector.done()
