import sys
from argparse import ArgumentParser, ArgumentTypeError
from typing import Sequence

from randqueue.config import SubsetConfig
from randqueue.logging import log_metric
from randqueue.subset import subset


def non_negative_int(value: str) -> int:
    try:
        k = int(value)
    except ValueError:
        raise ArgumentTypeError(f'expected an integer; got {value!r}')

    if k < 0:
        raise ArgumentTypeError(f'expected a non-negative integer; got {k}')

    return k


def parse_args(argv: Sequence[str] = None) -> SubsetConfig:
    parser = ArgumentParser(description='Print K lines of stdin chosen uniformly at random.')
    parser.add_argument('k', type=non_negative_int, help='number of lines to print')
    parser.add_argument('--seed', type=int, default=None, help='seed for a reproducible subset')
    parser.add_argument('--verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    return SubsetConfig(seed=args.seed, k=args.k, verbose=args.verbose)


def main(argv: Sequence[str] = None) -> None:
    config = parse_args(argv)

    written = subset(config.k, sys.stdin, sys.stdout, rng=config.rng())

    if config.verbose:
        log_metric('lines_written', written)


if __name__ == '__main__':
    main()
