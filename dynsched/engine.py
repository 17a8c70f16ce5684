#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""engine - Per-tick progression of data transfers and job execution.

Two engines exist, one for each scheduling policy:

    1. :class:`MixedExecutionEngine` walks the job pool, since each resource
       holds at most one job;
    2. :class:`ReservationExecutionEngine` walks the resource pool, running
       the head of each reservation queue while transferring data for the
       next reservations.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from .cluster import Cluster
from .job import Job, JobStatus
from .random_source import RandomSource
from .resource import Resource, ResourceStatus

logger = logging.getLogger(__name__)

PER_MILLE = 1000


class ExecutionEngine(ABC):
    """Base class for execution engines.

    Parameters
    ----------
        random_source : RandomSource
            Source for the departure draws made when a job completes
        leave_probability : int
            Per mille chance of a resource departing after completing a job
    """

    completed: List[Job]
    'Jobs completed during the last call to :func:`step`.'

    def __init__(self, random_source: RandomSource, leave_probability: int):
        if not 0 <= leave_probability <= PER_MILLE:
            raise AssertionError(
                f'Probability {leave_probability} out of [0, {PER_MILLE}]'
            )
        self.random_source = random_source
        self.leave_probability = leave_probability
        self.completed = []

    def should_leave(self) -> bool:
        """Draws whether a resource departs after completing a job."""
        return self.random_source.randint(1, PER_MILLE) <= self.leave_probability

    @abstractmethod
    def step(self, cluster: Cluster) -> List[Job]:
        """Advances every transfer and execution in the cluster by one tick.

        Returns:
            List[Job]: The jobs that completed in this tick.
        """


class MixedExecutionEngine(ExecutionEngine):
    "Execution engine for single-job resources."

    def step(self, cluster: Cluster) -> List[Job]:
        self.completed = []
        for job in cluster.jobs:
            resource = job.resource
            if job.status == JobStatus.SENDING:
                job.transfer_remaining -= 1
                if job.transfer_remaining <= 0:
                    job.status = JobStatus.RUNNING
                    resource.status = ResourceStatus.BUSY
            elif job.status == JobStatus.RUNNING:
                job.workload -= resource.level
                resource.used_ticks += 1
                if job.workload <= 0:
                    self._complete(job, resource)
        return self.completed

    def _complete(self, job: Job, resource: Resource) -> None:
        job.status = JobStatus.DONE
        resource.status = ResourceStatus.AVAILABLE
        if self.should_leave():
            resource.status = ResourceStatus.LEAVING
        self.completed.append(job)
        logger.debug('Completed %s on %s', job, resource)


class ReservationExecutionEngine(ExecutionEngine):
    "Execution engine for resources with reservation queues."

    def step(self, cluster: Cluster) -> List[Job]:
        self.completed = []
        for resource in cluster.resources:
            if resource.status == ResourceStatus.NOT_ACCEPTING_JOBS \
                    and not resource.reservations:
                resource.status = ResourceStatus.LEAVING
                logger.debug('%s drained', resource)
            if not resource.reservations:
                continue
            self.run(resource)
            self.send(resource)
        return self.completed

    def run(self, resource: Resource) -> None:
        """Advances the job at the head of the reservation queue."""
        job = resource.reservations[0].job
        if job.status == JobStatus.RUNNING:
            job.workload -= resource.level
            resource.committed_workload -= resource.level
            resource.used_ticks += 1
            if job.workload < 0:
                self._complete(job, resource)
        elif job.status == JobStatus.READY_TO_RUN:
            job.status = JobStatus.RUNNING

    def send(self, resource: Resource) -> None:
        """Transfers data for the first reservation still needing it.

        When the transfer of a job finishes, the transfer of the job right
        behind it in the queue starts in the same tick.
        """
        reservations = resource.reservations
        for position, reservation in enumerate(reservations):
            job = reservation.job
            if job.status == JobStatus.SENDING:
                job.transfer_remaining -= 1
                if job.transfer_remaining <= 0:
                    job.status = JobStatus.READY_TO_RUN
                    if position + 1 < len(reservations):
                        reservations[position + 1].job.status = \
                            JobStatus.SENDING
                break
            if job.status == JobStatus.WAITING_TO_SEND:
                job.status = JobStatus.SENDING
                break

    def _complete(self, job: Job, resource: Resource) -> None:
        job.status = JobStatus.DONE
        resource.reservations.popleft()
        # The last decrement overshoots the job's remaining workload.
        resource.committed_workload -= job.workload
        if not resource.reservations \
                and resource.status == ResourceStatus.HAS_JOBS:
            resource.status = ResourceStatus.AVAILABLE
        if self.should_leave():
            resource.status = ResourceStatus.NOT_ACCEPTING_JOBS
        self.completed.append(job)
        logger.debug('Completed %s on %s', job, resource)
