import sys
from typing import Iterable

import mlflow

# stdout carries the subset filter's records, so metrics print to stderr.


def log_metric(key: str, value, step: int = None, to_mlflow: bool = False) -> None:
    if step is None:
        print(f'{key}={value}', file=sys.stderr)
    else:
        print(f'[step {step}] {key}={value}', file=sys.stderr)

    if to_mlflow:
        mlflow.log_metric(key, value, step=step)


def log_metrics(metrics: dict[str, ...], step: int = None, to_mlflow: bool = False) -> None:
    for key, value in metrics.items():
        log_metric(key, value, step=step, to_mlflow=False)

    if to_mlflow:
        mlflow.log_metrics(metrics, step=step)


def log_params(config: Iterable, to_mlflow: bool = False) -> None:
    params = dict(config)
    log_metrics(params)

    if to_mlflow:
        mlflow.log_params(params)
