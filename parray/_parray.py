from collections.abc import Sequence, Hashable
from functools import wraps
from types import GenericAlias

from immutables import Map

from parray._collector import Collector, collect_into
from parray._index import Policy, normalize
from parray._reduce import ArrayIterator
from parray._reindex import shift_after
from parray._result import returning_result


def _comparator(f):
    @wraps(f)
    def wrapper(self, other):
        if isinstance(other, PArray):
            return f(self, other)
        return NotImplemented
    return wrapper


class PArray(object):
    """
    Persistent array. Elements are addressed by position, negative positions count
    from the end. Every update returns a new PArray, the original is never changed.

    Do not instantiate directly, instead use the factory functions :py:func:`pa` or
    :py:func:`parray` to create an instance.

    Elements are stored in a hash array mapped trie (an immutables.Map) keyed by position,
    which lets versions share most of their structure. Access, replacement and adding or
    removing at the end touch a single key. Inserting or removing elsewhere moves every
    element after the affected position and is O(n).

    All indexed operations come in two flavours. The plain one returns Success or Failure,
    the ``_or_raise`` one returns the value directly and raises OutOfBounds, an IndexError.

    The following are examples of some common operations on persistent arrays

    >>> a1 = pa(1, 2, 3)
    >>> a2 = a1.add(4)
    >>> a3 = a1.add_at_or_raise(1, 4)
    >>> a1
    parray([1, 2, 3])
    >>> a2
    parray([1, 2, 3, 4])
    >>> a3
    parray([1, 4, 2, 3])
    >>> a3.get(-1)
    Success(3)
    >>> a3.get(4)
    Failure(ErrorKind.OUT_OF_BOUNDS)
    >>> a3[4]
    Traceback (most recent call last):
    ...
    parray._index.OutOfBounds: Index 4 is out of bounds for length 4
    """
    __slots__ = ('_length', '_contents', '__weakref__')

    def __new__(cls, length, contents):
        self = super(PArray, cls).__new__(cls)
        self._length = length
        self._contents = contents
        return self

    __class_getitem__ = classmethod(GenericAlias)

    @property
    def length(self):
        return self._length

    def __len__(self):
        return self._length

    # Retrieval

    def get_or_raise(self, index):
        """
        Return the element at index, raise OutOfBounds if there is none.

        >>> pa(1, 2, 3).get_or_raise(-1)
        3
        """
        return self._contents[normalize(index, self._length)]

    @returning_result
    def get(self, index):
        """
        Return Success(element) for the element at index or Failure if index is out of bounds.

        >>> pa(1, 2, 3).get(1)
        Success(2)
        >>> pa(1, 2, 3).get(3)
        Failure(ErrorKind.OUT_OF_BOUNDS)
        """
        return self.get_or_raise(index)

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index == slice(None):
                return self

            return _EMPTY_PARRAY.extend(self._contents[p] for p in range(self._length)[index])

        return self.get_or_raise(index)

    def slice(self, start, count, step=1):
        """
        Return a list of at most count elements, taken from position start and every
        step positions after it. Only the selected positions are read.

        >>> pa(*range(10)).slice(0, 3, 2)
        [0, 2, 4]
        >>> pa(*range(10)).slice(9, 10)
        [9]
        """
        if step <= 0:
            raise ValueError('slice step must be positive, was {0}'.format(step))

        if start < 0:
            start = max(self._length + start, 0)

        positions = range(start, self._length, step)[:max(count, 0)]
        return [self._contents[p] for p in positions]

    # Replacement

    def set_or_raise(self, index, value):
        """
        Return a new PArray with the element at index replaced, raise OutOfBounds if there is none.

        >>> pa(1, 2, 3).set_or_raise(-1, 4)
        parray([1, 2, 4])
        """
        position = normalize(index, self._length)
        return PArray(self._length, self._contents.set(position, value))

    @returning_result
    def set(self, index, value):
        """
        Return Success with a new PArray where the element at index is replaced,
        or Failure if index is out of bounds.

        >>> pa(1, 2, 3).set(1, 4)
        Success(parray([1, 4, 3]))
        """
        return self.set_or_raise(index, value)

    # Addition

    def add(self, value):
        """
        Return a new PArray with value added at the end.

        >>> pa(1, 2, 3).add(4)
        parray([1, 2, 3, 4])
        """
        return PArray(self._length + 1, self._contents.set(self._length, value))

    append = add

    def add_at_or_raise(self, index, value):
        """
        Return a new PArray with value inserted at index, moving the element currently there
        and all following ones one step right. An index equal to the length appends.
        Raise OutOfBounds for any index further out.

        >>> pa(1, 2, 3).add_at_or_raise(-2, 4)
        parray([1, 4, 2, 3])
        >>> pa(1, 2, 3).add_at_or_raise(4, 4)
        Traceback (most recent call last):
        ...
        parray._index.OutOfBounds: Index 4 is out of bounds for length 3
        """
        position = normalize(index, self._length, Policy.INSERTION)
        if position == self._length:
            return self.add(value)

        mutation = self._contents.mutate()
        shift_after(mutation, position, 1)
        mutation[position] = value
        return PArray(self._length + 1, mutation.finish())

    @returning_result
    def add_at(self, index, value):
        """
        Like add_at_or_raise but returning Success or Failure.

        >>> pa(1, 2, 3).add_at(1, 4)
        Success(parray([1, 4, 2, 3]))
        >>> pa(1, 2, 3).add_at(4, 4)
        Failure(ErrorKind.OUT_OF_BOUNDS)
        """
        return self.add_at_or_raise(index, value)

    def extend(self, iterable):
        """
        Return a new PArray with all elements of iterable added at the end, in order.

        >>> pa(1, 2).extend([3, 4])
        parray([1, 2, 3, 4])
        """
        return self.evolver().extend(iterable).persistent()

    __add__ = extend

    # Removal

    def remove(self):
        """
        Return a new PArray without the last element. An empty PArray is returned as is.

        >>> pa(1, 2, 3).remove()
        parray([1, 2])
        >>> pa().remove()
        parray([])
        """
        if self._length == 0:
            return self

        return PArray(self._length - 1, self._contents.delete(self._length - 1))

    def remove_at_or_raise(self, index):
        """
        Return a new PArray without the element at index, moving all following elements one
        step left. Raise OutOfBounds if there is no element at index, which is always the case
        for an empty PArray.

        >>> pa(1, 2, 3).remove_at_or_raise(1)
        parray([1, 3])
        """
        position = normalize(index, self._length)
        if position == self._length - 1:
            return self.remove()

        mutation = self._contents.mutate()
        shift_after(mutation, position, -1)
        return PArray(self._length - 1, mutation.finish())

    @returning_result
    def remove_at(self, index):
        """
        Like remove_at_or_raise but returning Success or Failure.

        >>> pa(1, 2, 3).remove_at(-2)
        Success(parray([1, 3]))
        >>> pa().remove_at(0)
        Failure(ErrorKind.OUT_OF_BOUNDS)
        """
        return self.remove_at_or_raise(index)

    # Conversion and traversal

    def tolist(self):
        """
        Return the elements as a python list, in position order.

        >>> pa(1, 2, 3).tolist()
        [1, 2, 3]
        """
        return [self._contents[p] for p in range(self._length)]

    def totuple(self):
        return tuple(self.tolist())

    def __iter__(self):
        return ArrayIterator(self)

    def __reversed__(self):
        for p in range(self._length - 1, -1, -1):
            yield self._contents[p]

    def reduce(self, command, fun):
        """
        Fold the elements in position order. fun(element, acc) returns Cont, Halt or Suspend
        to continue, stop or pause the traversal, see :py:mod:`parray._reduce`.

        >>> from parray import Cont
        >>> pa(1, 2, 3).reduce(Cont(0), lambda x, acc: Cont(acc + x))
        Done(6)
        """
        return ArrayIterator(self).reduce(command, fun)

    def collector(self):
        """
        Return a Collector that adds streamed elements to the end of this PArray.
        """
        return Collector(self)

    def into(self, iterable):
        """
        Return a new PArray with the elements of iterable collected at the end.

        >>> pa(0).into(range(1, 4))
        parray([0, 1, 2, 3])
        """
        return collect_into(self, iterable)

    def evolver(self):
        """
        Create a new evolver for this PArray.

        The evolver acts as a mutable view of the array with "transaction like" semantics.
        The underlying PArray is not affected and several evolvers created from the same
        PArray do not interfere with each other.

        >>> a1 = pa(1, 2, 3)
        >>> e = a1.evolver()
        >>> e[1] = 22
        >>> _ = e.append(4)
        >>> e[-1] += 1
        >>> del e[0]
        >>> a1
        parray([1, 2, 3])
        >>> e.persistent()
        parray([22, 3, 5])
        """
        return Evolver(self)

    # Comparison and hashing

    @_comparator
    def __eq__(self, other):
        return self is other or (self._length == other._length and self._contents == other._contents)

    @_comparator
    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.totuple())

    def __repr__(self):
        return 'parray({0})'.format(str(self.tolist()))

    __str__ = __repr__

    def __reduce__(self):
        # Pickling and copy support
        return parray, (self.tolist(),)


class Evolver(object):
    __slots__ = ('_original', '_mutation', '_is_dirty')

    def __init__(self, original):
        self._original = original
        self._mutation = original._contents.mutate()
        self._is_dirty = False

    __class_getitem__ = classmethod(GenericAlias)

    def __len__(self):
        return len(self._mutation)

    def __getitem__(self, index):
        return self._mutation[normalize(index, len(self._mutation))]

    def __setitem__(self, index, value):
        self._mutation[normalize(index, len(self._mutation))] = value
        self._is_dirty = True

    def set(self, index, value):
        self[index] = value
        return self

    def __delitem__(self, index):
        shift_after(self._mutation, normalize(index, len(self._mutation)), -1)
        self._is_dirty = True

    def delete(self, index):
        del self[index]
        return self

    def append(self, value):
        self._mutation[len(self._mutation)] = value
        self._is_dirty = True
        return self

    def extend(self, iterable):
        for value in iterable:
            self.append(value)
        return self

    def insert(self, index, value):
        position = normalize(index, len(self._mutation), Policy.INSERTION)
        shift_after(self._mutation, position, 1)
        self._mutation[position] = value
        self._is_dirty = True
        return self

    def is_dirty(self):
        return self._is_dirty

    def persistent(self):
        if self._is_dirty:
            contents = self._mutation.finish()
            self._original = PArray(len(contents), contents)
            self._mutation = contents.mutate()
            self._is_dirty = False

        return self._original

    def __repr__(self):
        elements = [self._mutation[p] for p in range(len(self._mutation))]
        return 'parray({0}).evolver()'.format(elements)


Sequence.register(PArray)
Hashable.register(PArray)

_EMPTY_PARRAY = PArray(0, Map())


def parray(iterable=()):
    """
    Create a new persistent array containing the elements of iterable, in order.

    >>> parray([1, 2, 3])
    parray([1, 2, 3])
    """
    if isinstance(iterable, PArray):
        return iterable

    return _EMPTY_PARRAY.extend(iterable)


def pa(*elements):
    """
    Create a new persistent array containing all parameters to this function.

    >>> pa(1, 2, 3)
    parray([1, 2, 3])
    """
    return parray(elements)
