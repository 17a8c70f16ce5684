#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""scheduler - Module with basic scheduling functionality.

Schedulers match at most one waiting job with one resource per call to
:func:`Scheduler.schedule`, which bounds the scheduling work done in a time
step to a single pass over the resource and job pools.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from dynsched.cluster import Cluster
from dynsched.job import Job
from dynsched.resource import Resource

logger = logging.getLogger(__name__)

Match = Tuple[Job, Resource]


class Scheduler(ABC):
    """Base class for scheduling.

    Subclasses implement :func:`select`, which picks the job and the resource
    to match, and :func:`assign`, which updates job and resource state once
    a match is found.
    """

    decisions: int

    def __init__(self):
        self.decisions = 0

    @abstractmethod
    def select(self, cluster: Cluster) -> Optional[Match]:
        """Selects a job and a resource to match.

        Returns:
            A (job, resource) tuple, or None if no match is possible now.
        """

    @abstractmethod
    def assign(self, job: Job, resource: Resource) -> None:
        """Commits `job` to run on `resource`."""

    def schedule(self, cluster: Cluster) -> Optional[Match]:
        """Schedules at most one job.

        Parameters
        ----------
            cluster : Cluster
                The cluster whose pools are scanned for a match

        Returns:
            The (job, resource) pair that was matched, if any.
        """
        match = self.select(cluster)
        if match is None:
            return None
        job, resource = match
        self.assign(job, resource)
        self.decisions += 1
        logger.debug('Matched %s with %s', job, resource)
        return match
