from enum import Enum
from functools import wraps

from parray._index import OutOfBounds


class ErrorKind(Enum):
    OUT_OF_BOUNDS = 'out_of_bounds'


class Success(object):
    """
    Result of an operation that succeeded, wrapping the produced value.

    >>> Success(2)
    Success(2)
    >>> Success(2).is_success
    True
    """
    __slots__ = ('value',)
    __match_args__ = ('value',)

    is_success = True

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Success):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((Success, self.value))

    def __repr__(self):
        return 'Success({0!r})'.format(self.value)


class Failure(object):
    """
    Result of an operation that could not be performed. Carries the kind of error
    and nothing else.

    >>> Failure(ErrorKind.OUT_OF_BOUNDS)
    Failure(ErrorKind.OUT_OF_BOUNDS)
    """
    __slots__ = ('error',)
    __match_args__ = ('error',)

    is_success = False

    def __init__(self, error):
        self.error = error

    def __eq__(self, other):
        if not isinstance(other, Failure):
            return NotImplemented
        return self.error == other.error

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((Failure, self.error))

    def __repr__(self):
        return 'Failure({0})'.format(self.error)


OUT_OF_BOUNDS_FAILURE = Failure(ErrorKind.OUT_OF_BOUNDS)


def returning_result(f):
    """
    Turn an operation that raises OutOfBounds into one that returns a Success or Failure.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return Success(f(*args, **kwargs))
        except OutOfBounds:
            return OUT_OF_BOUNDS_FAILURE
    return wrapper
