#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""sink - Destinations for periodic metrics records.

Records are lines of the form::

    <jobs done> <mean usage %> <mean wait ticks> <jobs submitted>

The same format is used regardless of the scheduling policy.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .stats import Stats

logger = logging.getLogger(__name__)


def format_record(stats: 'Stats') -> str:
    """Formats a metrics record as a newline-terminated line."""
    jobs_done, mean_usage, mean_wait, jobs_submitted = stats
    return f'{jobs_done:d} {mean_usage:f} {mean_wait:f} {jobs_submitted:d}\n'


def read_records(path) -> np.ndarray:
    """Reads a metrics log back into an array of shape (n, 4)."""
    rows = []
    with open(path, 'r') as fp:
        for line in fp:
            fields = line.split()
            if len(fields) != 4:
                continue
            rows.append([float(f) for f in fields])
    return np.array(rows, dtype=float).reshape(-1, 4)


class MetricsSink(ABC):
    "Abstract destination for metrics records."

    @abstractmethod
    def write(self, stats: 'Stats') -> None:
        """Writes a record. Failures must not interrupt the simulation."""


class FileMetricsSink(MetricsSink):
    """Appends records to a text file.

    The file is opened, appended to and closed for every record, so an
    interrupted simulation always leaves a valid log behind.

    Parameters
    ----------
        path : str
            The log file to append to
    """

    def __init__(self, path):
        self.path = path

    def write(self, stats: 'Stats') -> None:
        try:
            with open(self.path, 'a') as fp:
                fp.write(format_record(stats))
        except OSError as e:
            logger.warning('Unable to write metrics to %s: %s', self.path, e)

    def __repr__(self):
        return f'FileMetricsSink({self.path!r})'


class MemoryMetricsSink(MetricsSink):
    "Keeps records in memory."

    records: List['Stats']

    def __init__(self):
        self.records = []

    def write(self, stats: 'Stats') -> None:
        self.records.append(stats)

    @property
    def lines(self) -> List[str]:
        return [format_record(s) for s in self.records]
