__all__ = [
    'Subset',
    'subset',
]

from dataclasses import dataclass, field
from random import Random
from typing import TextIO

from randqueue.collections import EmptyCollectionError, RandomizedQueue


@dataclass
class Subset:
    """Writes ``k`` lines chosen uniformly at random from ``input`` to ``output``."""

    k: int
    input: TextIO
    output: TextIO
    rng: Random = None
    queue: RandomizedQueue[str] = field(init=False)

    def __post_init__(self):
        if self.k < 0:
            raise ValueError(f'k must be non-negative; got {self.k}')

        self.queue = RandomizedQueue(rng=self.rng)

    def run(self) -> int:
        self.read()
        return self.write()

    def read(self) -> None:
        for line in self.input:
            self.queue.enqueue(line.rstrip('\n'))

    def write(self) -> int:
        written = 0

        while written < self.k:
            try:
                line = self.queue.dequeue()
            except EmptyCollectionError:
                break

            self.output.write(line + '\n')
            written += 1

        return written


def subset(k: int, input: TextIO, output: TextIO, rng: Random = None) -> int:
    return Subset(k, input, output, rng=rng).run()
