#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""resource - Compute resources that join and leave the cluster."""

import enum
from collections import deque
from typing import Deque, Iterator

from .job import Job


class ResourceStatus(enum.IntEnum):
    """An enumeration for the states of a resource.

    Mixed scheduling uses `AVAILABLE`, `RECEIVING_DATA`, `BUSY` and
    `LEAVING`. Advance reservation scheduling uses `AVAILABLE`, `HAS_JOBS`,
    `NOT_ACCEPTING_JOBS` and `LEAVING`.
    """

    AVAILABLE = 1
    BUSY = 2
    LEAVING = 3
    RECEIVING_DATA = 4
    HAS_JOBS = 5
    NOT_ACCEPTING_JOBS = 6


class Reservation:
    """A commitment of a job to the execution queue of a resource.

    The reservation references the job, it does not own it: jobs are owned
    by the job pool of a :class:`dynsched.cluster.Cluster`.
    """

    __slots__ = ('job',)

    def __init__(self, job: Job):
        self.job = job

    def __repr__(self):
        return f'Reservation<{self.job.id}>'


class Resource:
    """A resource that runs jobs at a fixed processing rate.

    Parameters
    ----------
        resource_id : int
            The unique identifier of this resource
        level : int
            How many workload units this resource processes per tick
    """

    reservations: Deque[Reservation]

    def __init__(self, resource_id=-1, level=1):
        self.id: int = resource_id
        self.level: int = level
        self.status: ResourceStatus = ResourceStatus.AVAILABLE
        self.total_ticks: int = 0
        self.used_ticks: int = 0
        self.committed_workload: int = 0
        self.reservations = deque()

    def __str__(self):
        return (
            f'Resource<{self.id}, {self.status.name}, level={self.level}, '
            f'committed={self.committed_workload}, '
            f'queue={len(self.reservations)}>'
        )

    __repr__ = __str__

    @property
    def accepting(self) -> bool:
        """Whether new reservations may be committed to this resource."""
        return self.status not in (
            ResourceStatus.LEAVING, ResourceStatus.NOT_ACCEPTING_JOBS
        )

    @property
    def disengaged(self) -> bool:
        """Whether this resource may be removed from its pool."""
        return self.status == ResourceStatus.LEAVING and not self.reservations

    @property
    def usage(self) -> float:
        """Percentage of the lifetime of this resource spent running jobs."""
        if self.total_ticks == 0:
            return 0.0
        return self.used_ticks / self.total_ticks * 100

    @property
    def queued_jobs(self) -> Iterator[Job]:
        """The jobs in this resource's reservation queue, in commit order."""
        return (rsv.job for rsv in self.reservations)

    def reserve(self, job: Job) -> Reservation:
        """Appends a reservation for `job` to the end of the queue."""
        reservation = Reservation(job)
        self.reservations.append(reservation)
        self.committed_workload += job.workload
        return reservation


class ResourceParameters:
    """Bounds for the processing level of new resources.

    Parameters
    ----------
        lower_level_bound : int
            The slowest a resource can be
        upper_level_bound : int
            The fastest a resource can be
    """

    def __init__(self, lower_level_bound: int, upper_level_bound: int):
        if lower_level_bound <= 0:
            raise AssertionError('Unable to work with non-positive levels.')
        if lower_level_bound > upper_level_bound:
            raise AssertionError('Lower bounds must not exceed upper bounds.')
        self.lower_level_bound = lower_level_bound
        self.upper_level_bound = upper_level_bound

    def sample(self, resource_id: int, random_source) -> Resource:
        """Samples a new resource with a uniformly drawn level."""
        level = random_source.randint(
            self.lower_level_bound, self.upper_level_bound
        )
        return Resource(resource_id, level)
