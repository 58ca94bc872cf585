from argparse import ArgumentParser
from math import factorial
from typing import Sequence

import mlflow

from randqueue.collections import RandomizedQueue
from randqueue.config import BenchmarkConfig
from randqueue.logging import log_metric, log_metrics, log_params
from randqueue.stats import (
    coincidence_rate,
    compute_uniformity,
    dequeue_counts,
    first_position_counts,
    sample_counts,
)


def parse_args(argv: Sequence[str] = None) -> BenchmarkConfig:
    parser = ArgumentParser(description='Check that RandomizedQueue draws are uniform.')
    parser.add_argument('--items', type=int, default=BenchmarkConfig.items)
    parser.add_argument('--trials', type=int, default=BenchmarkConfig.trials)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--run-name', default=None, help='also log the run to mlflow under this name')
    parser.add_argument('--tracking-uri', default=None, help='mlflow tracking server')
    args = parser.parse_args(argv)

    if args.items < 2:
        parser.error('--items must be at least 2')
    if args.trials < 1:
        parser.error('--trials must be positive')

    return BenchmarkConfig(
        seed=args.seed,
        items=args.items,
        trials=args.trials,
        run_name=args.run_name,
        tracking_uri=args.tracking_uri,
    )


def run(config: BenchmarkConfig) -> dict[str, dict[str, ...]]:
    rng = config.rng()
    n, trials = config.items, config.trials

    results = dict(
        dequeue=compute_uniformity(dequeue_counts(n, trials, rng=rng)),
        sample=compute_uniformity(sample_counts(n, trials, rng=rng)),
        iterate=compute_uniformity(first_position_counts(n, trials, rng=rng)),
    )

    queue = RandomizedQueue(range(n), rng=rng)
    results['iterate']['coincidence_rate'] = coincidence_rate(queue, trials)

    return results


def main(argv: Sequence[str] = None) -> None:
    config = parse_args(argv)

    if config.run_name:
        if config.tracking_uri:
            mlflow.set_tracking_uri(config.tracking_uri)
        mlflow.set_experiment('randqueue-benchmark')
        with mlflow.start_run(run_name=config.run_name):
            _main(config, to_mlflow=True)
    else:
        _main(config)


def _main(config: BenchmarkConfig, to_mlflow: bool = False) -> None:
    log_params(config, to_mlflow=to_mlflow)

    results = run(config)
    for name, metrics in results.items():
        log_metrics(
            {f'{name}.{key}': value for key, value in metrics.items()},
            to_mlflow=to_mlflow,
        )

    log_metric(
        'iterate.expected_coincidence_rate',
        1 / factorial(config.items),
        to_mlflow=to_mlflow,
    )


if __name__ == '__main__':
    main()
