from dataclasses import asdict, dataclass
from random import Random
from typing import Optional


@dataclass
class Config:
    seed: Optional[int] = None

    def __iter__(self):
        yield from asdict(self).items()

    def rng(self) -> Random:
        return Random(self.seed)


@dataclass
class SubsetConfig(Config):
    k: int = 0
    verbose: bool = False


@dataclass
class BenchmarkConfig(Config):
    items: int = 5
    trials: int = 100_000
    run_name: Optional[str] = None
    tracking_uri: Optional[str] = None
