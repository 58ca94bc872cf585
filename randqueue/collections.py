__all__ = [
    'EmptyCollectionError',
    'RandomizedQueue',
    'RandomizedQueueIterator',
]

from random import Random
from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar('T')


class EmptyCollectionError(IndexError):
    pass


class RandomizedQueue(Generic[T]):
    """
    A queue that removes, samples and iterates over its items uniformly at
    random.

    Items live in a plain list; position in the list means nothing. Removal
    swaps the chosen item with the last one and pops it, so both enqueue and
    dequeue are amortized O(1).

    Every random draw, including ``sample()`` and the start of a traversal,
    comes from ``rng``. The queue takes ownership of it and never hands it
    back out. Pass a seeded ``Random`` for reproducible runs.

    Not thread safe.
    """

    def __init__(self, items: Iterable[T] = None, rng: Random = None):
        self._rng = rng or Random()
        self._data: List[T] = []
        self._mod_count = 0

        if items is not None:
            self.extend(items)

    def __iter__(self) -> 'RandomizedQueueIterator[T]':
        return RandomizedQueueIterator(self)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iadd__(self, item: T) -> 'RandomizedQueue[T]':
        self.enqueue(item)
        return self

    def __repr__(self) -> str:
        return f'RandomizedQueue({self._data!r})'

    def is_empty(self) -> bool:
        return not self._data

    def size(self) -> int:
        return len(self._data)

    def enqueue(self, item: T) -> None:
        self._data.append(item)
        self._mod_count += 1

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.enqueue(item)

    def dequeue(self) -> T:
        """Remove and return an item chosen uniformly at random."""

        idx = self._random_index()
        data = self._data

        item = data[idx]
        data[idx] = data[-1]
        data.pop()
        self._mod_count += 1

        return item

    def sample(self) -> T:
        """Return, without removing it, an item chosen uniformly at random."""
        return self._data[self._random_index()]

    def _random_index(self) -> int:
        if self.is_empty():
            raise EmptyCollectionError('RandomizedQueue is empty')

        return self._rng.randrange(len(self._data))

    def _permuted_indices(self) -> List[int]:
        indices = list(range(len(self._data)))
        self._rng.shuffle(indices)
        return indices


class RandomizedQueueIterator(Iterator[T]):
    """
    One pass over a ``RandomizedQueue`` in a uniformly random order.

    The order is drawn when the iterator is created. Enqueueing or dequeueing
    while the pass is open invalidates it: the next step raises
    ``RuntimeError``, even when every item has already been yielded.
    Sampling does not. Once ``StopIteration`` is raised it is raised for good.
    """

    def __init__(self, queue: RandomizedQueue[T]):
        self._queue = queue
        self._permutation = queue._permuted_indices()
        self._expected_mod_count = queue._mod_count
        self._pos = 0

    def __iter__(self) -> 'RandomizedQueueIterator[T]':
        return self

    def __next__(self) -> T:
        if self._permutation is None:
            raise StopIteration

        if self._queue._mod_count != self._expected_mod_count:
            raise RuntimeError('RandomizedQueue mutated during iteration')

        if self._pos >= len(self._permutation):
            self._permutation = None
            raise StopIteration

        item = self._queue._data[self._permutation[self._pos]]
        self._pos += 1
        return item

    def __length_hint__(self) -> int:
        if self._permutation is None:
            return 0

        return len(self._permutation) - self._pos
