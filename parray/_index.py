from enum import Enum
from numbers import Integral


class OutOfBounds(IndexError):
    """
    Raised when an index, after counting negative indices from the end, falls outside
    the range permitted by the operation.

    >>> raise OutOfBounds(3, 3)
    Traceback (most recent call last):
    ...
    parray._index.OutOfBounds: Index 3 is out of bounds for length 3
    """
    def __init__(self, index, length):
        super(OutOfBounds, self).__init__(index, length)
        self.index = index
        self.length = length

    def __str__(self):
        return 'Index {0} is out of bounds for length {1}'.format(self.index, self.length)


class Policy(Enum):
    # Reads, replacements and removals need an existing element
    ACCESS = 0

    # Insertions may also target the position one past the last element
    INSERTION = 1


def normalize(index, length, policy=Policy.ACCESS):
    """
    Translate a signed index into an absolute position within an array of the given length.

    Negative indices are offsets from the end. The caller supplied index, not the
    translated one, is reported when the position is out of bounds.

    >>> normalize(-1, 3)
    2
    >>> normalize(3, 3, Policy.INSERTION)
    3
    >>> normalize(3, 3)
    Traceback (most recent call last):
    ...
    parray._index.OutOfBounds: Index 3 is out of bounds for length 3
    """
    if not isinstance(index, Integral):
        raise TypeError("'%s' object cannot be interpreted as an index" % type(index).__name__)

    position = length + index if index < 0 else index
    upper = length if policy is Policy.INSERTION else length - 1
    if not 0 <= position <= upper:
        raise OutOfBounds(index, length)

    return position
