__all__ = [
    'EmptyCollectionError',
    'RandomizedQueue',
    'RandomizedQueueIterator',
    'Subset',
    'subset',
]

from randqueue.collections import EmptyCollectionError, RandomizedQueue, RandomizedQueueIterator
from randqueue.subset import Subset, subset
