# -*- coding: utf-8 -*-
import logging

from _parray_version import __version__

from parray._index import OutOfBounds, Policy

from parray._result import Success, Failure, ErrorKind

from parray._reduce import Cont, Halt, Suspend, Done, Halted, Suspended, ArrayIterator

from parray._collector import Collector, ABORTED

from parray._parray import parray, pa, PArray, Evolver

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ('parray', 'pa', 'PArray', 'Evolver', 'OutOfBounds', 'Policy',
           'Success', 'Failure', 'ErrorKind',
           'Cont', 'Halt', 'Suspend', 'Done', 'Halted', 'Suspended', 'ArrayIterator',
           'Collector', 'ABORTED')
