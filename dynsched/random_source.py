#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""random_source - Sources of randomness for the simulation.

Every stochastic decision of the simulator goes through a `RandomSource`, so
that simulations can be seeded or replayed from fixed sequences.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional

import numpy as np


class RandomSource(ABC):
    "An abstract source of uniformly distributed integers."

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Draws an integer uniformly from the closed range [low, high]."""


class NumpyRandomSource(RandomSource):
    """A random source backed by a numpy random number generator.

    Parameters
    ----------
        seed : Optional[int]
            Seed for the generator. When omitted, fresh entropy is used.
    """

    generator: np.random.Generator

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        return int(self.generator.integers(low, high, endpoint=True))


class SequenceRandomSource(RandomSource):
    """A random source that replays a fixed sequence of values.

    Values are returned as given, regardless of the requested range, which
    makes it possible to drive every branch of the simulation from tests.

    Parameters
    ----------
        values : Iterable[int]
            The values to replay
        cycle : bool
            Whether to restart the sequence once it is exhausted
    """

    values: Iterator[int]

    def __init__(self, values: Iterable[int], cycle: bool = False):
        self.values = itertools.cycle(values) if cycle else iter(values)
        self.draws = 0

    def randint(self, low: int, high: int) -> int:
        try:
            value = next(self.values)
        except StopIteration:
            raise IndexError(
                f'Random sequence exhausted after {self.draws} draws'
            ) from None
        self.draws += 1
        return value

    def extend(self, values: Iterable[int]) -> None:
        """Appends values to be replayed after the current ones."""
        self.values = itertools.chain(self.values, values)
