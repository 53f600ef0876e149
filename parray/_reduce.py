"""
Early-terminable, resumable traversal of a PArray.

A traversal is driven by the consumer. For every element the step function returns one
of three commands telling the traversal what to do next:

- Cont(acc) moves on to the next position
- Halt(acc) stops and reports Halted(acc)
- Suspend(acc) stops and reports Suspended(acc, ...) which can be resumed later

>>> from parray import pa
>>> pa(1, 2, 3).reduce(Cont(0), lambda x, acc: Cont(acc + x))
Done(6)
>>> pa(1, 2, 3).reduce(Cont([]), lambda x, acc: Halt(acc + [x]) if x == 2 else Cont(acc + [x]))
Halted([1, 2])
"""
import logging
from types import GenericAlias

logger = logging.getLogger(__name__)


class _Signal(object):
    __slots__ = ('acc',)
    __match_args__ = ('acc',)

    def __init__(self, acc):
        self.acc = acc

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.acc == other.acc

    def __hash__(self):
        return hash((type(self), self.acc))

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.acc)


class Cont(_Signal):
    __slots__ = ()


class Halt(_Signal):
    __slots__ = ()


class Suspend(_Signal):
    __slots__ = ()


class Done(_Signal):
    __slots__ = ()


class Halted(_Signal):
    __slots__ = ()


class Suspended(_Signal):
    """
    A paused traversal. Call resume() (or the Suspended value itself) with the next
    command to continue from the first unvisited position. Every resume starts from
    that same position, so a Suspended value can be resumed any number of times.

    >>> from parray import pa
    >>> suspended = pa(1, 2, 3).reduce(Cont(0), lambda x, acc: Suspend(acc + x))
    >>> suspended
    Suspended(1)
    >>> suspended.resume(Cont(suspended.acc))
    Suspended(3)
    >>> suspended.resume(Cont(suspended.acc))
    Suspended(3)
    """
    __slots__ = ('position', '_array', '_fun')

    def __init__(self, acc, iterator, fun):
        super(Suspended, self).__init__(acc)
        self.position = iterator.position
        self._array = iterator._array
        self._fun = fun

    @property
    def iterator(self):
        return ArrayIterator(self._array, self.position)

    def resume(self, command):
        return self.iterator.reduce(command, self._fun)

    __call__ = resume

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.acc == other.acc and self.position == other.position

    def __hash__(self):
        return hash((Suspended, self.acc, self.position))


class ArrayIterator(object):
    """
    Pull based iterator over a PArray that remembers the next position to visit.

    A suspended traversal remembers the position it stopped at and resumes with a
    fresh iterator starting there.
    """
    __slots__ = ('_array', '_position')

    def __init__(self, array, position=0):
        self._array = array
        self._position = position

    __class_getitem__ = classmethod(GenericAlias)

    @property
    def position(self):
        return self._position

    def __iter__(self):
        return self

    def __next__(self):
        if self._position >= self._array._length:
            raise StopIteration

        element = self._array._contents[self._position]
        self._position += 1
        return element

    def __length_hint__(self):
        return max(self._array._length - self._position, 0)

    def __repr__(self):
        return 'ArrayIterator({0!r}, position={1})'.format(self._array, self._position)

    def reduce(self, command, fun):
        """
        Fold the remaining elements with fun(element, acc) which must return Cont, Halt or Suspend.
        """
        while True:
            if isinstance(command, Halt):
                return Halted(command.acc)

            if isinstance(command, Suspend):
                logger.debug('Traversal suspended at position %d of %d', self._position, self._array._length)
                return Suspended(command.acc, self, fun)

            if not isinstance(command, Cont):
                raise TypeError('Expected Cont, Halt or Suspend, got {0!r}'.format(command))

            try:
                element = next(self)
            except StopIteration:
                return Done(command.acc)

            command = fun(element, command.acc)
