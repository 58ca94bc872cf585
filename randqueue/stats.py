from random import Random
from typing import Callable, Hashable, Sequence, Tuple

import numpy as np
from scipy import stats

from randqueue.collections import RandomizedQueue


def count_outcomes(draw: Callable[[], Hashable], items: Sequence[Hashable], trials: int) -> np.ndarray:
    """How many times ``draw()`` returned each of ``items`` over ``trials`` calls."""

    index = {item: i for i, item in enumerate(items)}
    counts = np.zeros(len(items), dtype=np.int64)

    for _ in range(trials):
        counts[index[draw()]] += 1

    return counts


def chi_square(counts: np.ndarray) -> Tuple[float, float]:
    """Pearson chi-square statistic and p-value of ``counts`` against a uniform distribution."""

    counts = np.asarray(counts, dtype=float)
    if counts.sum() <= 0:
        raise ValueError('No outcomes in counts')

    statistic, p_value = stats.chisquare(counts)
    return float(statistic), float(p_value)


def compute_uniformity(counts: np.ndarray) -> dict[str, ...]:
    counts = np.asarray(counts, dtype=float)
    statistic, p_value = chi_square(counts)
    expected = counts.sum() / len(counts)

    return dict(
        chi_square=statistic,
        p_value=p_value,
        degrees_of_freedom=len(counts) - 1,
        max_rel_deviation=float(np.abs(counts - expected).max() / expected),
    )


def dequeue_counts(n: int, trials: int, rng: Random = None) -> np.ndarray:
    rng = rng or Random()
    items = range(n)

    def draw():
        return RandomizedQueue(items, rng=rng).dequeue()

    return count_outcomes(draw, items, trials)


def sample_counts(n: int, trials: int, rng: Random = None) -> np.ndarray:
    items = range(n)
    queue = RandomizedQueue(items, rng=rng)
    return count_outcomes(queue.sample, items, trials)


def first_position_counts(n: int, trials: int, rng: Random = None) -> np.ndarray:
    items = range(n)
    queue = RandomizedQueue(items, rng=rng)
    return count_outcomes(lambda: next(iter(queue)), items, trials)


def coincidence_rate(queue: RandomizedQueue, trials: int) -> float:
    """Fraction of trials in which two fresh traversals of ``queue`` agree on the order."""

    if trials <= 0:
        raise ValueError(f'trials must be positive; got {trials}')

    same = sum(list(queue) == list(queue) for _ in range(trials))
    return same / trials
