#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""stats - Wait time, utilization and completion accounting.

The :class:`MetricsTracker` runs at the beginning of every tick, so that the
state changes made by the previous tick are accounted for before jobs and
resources are added to or removed from the cluster.
"""

import logging
from typing import Dict, NamedTuple, Optional

import numpy as np

from .cluster import Cluster
from .resource import ResourceStatus
from .sink import MetricsSink

logger = logging.getLogger(__name__)


class Stats(NamedTuple):
    """A named tuple with simulation statistics"""

    jobs_done: int
    mean_usage: float
    mean_wait: float
    jobs_submitted: int


class MetricsTracker:
    """Tracks wait times, completed jobs and resource utilization.

    Parameters
    ----------
        max_jobs : int
            Number of completed jobs after which the simulation ends
        record_interval : int
            A snapshot is sent to the sink every `record_interval`
            completions
        sink : Optional[MetricsSink]
            Where snapshots are written to
    """

    jobs_done: int
    mean_usage: float
    resources_gone: int
    stats: Dict[int, Stats]

    def __init__(self, max_jobs: int, record_interval: int,
                 sink: Optional[MetricsSink] = None):
        if max_jobs <= 0 or record_interval <= 0:
            raise AssertionError('Job quota and record interval must be > 0')
        self.max_jobs = max_jobs
        self.record_interval = record_interval
        self.sink = sink

        self.jobs_done = 0
        self.mean_usage = 0.0
        self.resources_gone = 0
        self.finished = False
        self.stats = {}

    def add_usage_sample(self, usage: float) -> None:
        """Folds the utilization of a departing resource into the mean."""
        self.mean_usage = (
            self.mean_usage * self.resources_gone + usage
        ) / (self.resources_gone + 1)
        self.resources_gone += 1

    @staticmethod
    def mean_wait(cluster: Cluster) -> float:
        """Mean wait ticks over every job currently in the pool."""
        if not len(cluster.jobs):
            return 0.0
        return float(np.mean([j.wait_ticks for j in cluster.jobs]))

    def snapshot(self, cluster: Cluster) -> Stats:
        "Returns the current statistics of the simulation."
        return Stats(
            self.jobs_done,
            self.mean_usage,
            self.mean_wait(cluster),
            cluster.jobs_submitted,
        )

    def record(self, cluster: Cluster, current_time: int) -> Stats:
        """Stores a snapshot and sends it to the sink."""
        stats = self.snapshot(cluster)
        self.stats[current_time] = stats
        logger.info(
            'Tick %d: %d jobs done, mean usage %.2f%%, mean wait %.2f, '
            '%d jobs submitted', current_time, *stats
        )
        if self.sink is not None:
            self.sink.write(stats)
        return stats

    def step(self, cluster: Cluster, current_time: int) -> bool:
        """Accounts for one tick.

        Parameters
        ----------
            cluster : Cluster
                The cluster whose pools are inspected
            current_time : int
                The tick being accounted for

        Returns:
            bool: True once the job quota has been reached. `jobs_done`
            never exceeds the quota.
        """
        for job in cluster.jobs:
            if job.waiting:
                job.wait_ticks += 1
            elif job.done:
                # Completions past the quota in the final tick are not counted.
                if self.jobs_done >= self.max_jobs:
                    continue
                self.jobs_done += 1
                if self.jobs_done % self.record_interval == 0:
                    self.record(cluster, current_time)

        for resource in cluster.resources:
            resource.total_ticks += 1
            if resource.status == ResourceStatus.LEAVING:
                self.add_usage_sample(resource.usage)

        self.finished = self.jobs_done >= self.max_jobs
        return self.finished
