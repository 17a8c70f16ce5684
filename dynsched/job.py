#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""job - Classes for jobs in the simulator.
"""

import enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .resource import Resource
    from .random_source import RandomSource


class JobStatus(enum.IntEnum):
    """An enumeration for different states of a job within our simulator.

    `SENDING` is shared by both policies. `WAITING_TO_SEND` and
    `READY_TO_RUN` only happen under advance reservation scheduling.
    """

    WAITING = 1
    RUNNING = 2
    DONE = 3
    SENDING = 4
    WAITING_TO_SEND = 5
    READY_TO_RUN = 6


WAIT_STATES = frozenset(
    [JobStatus.WAITING, JobStatus.WAITING_TO_SEND, JobStatus.READY_TO_RUN]
)
'States in which a job accumulates wait time.'


class Job:
    """A job in the system.

    A job is created `WAITING` with a workload (execution units) and an
    amount of data transfer ticks that must elapse before it is able to
    run. Once matched with a :class:`dynsched.resource.Resource`, the
    resource stays referenced by the job until the job leaves the job pool.

    Parameters
    ----------
        job_id : int
            The unique identifier of this job
        workload : int
            Remaining execution units
        transfer_remaining : int
            Number of ticks of data transfer before execution may start
    """

    resource: Optional['Resource']

    def __init__(self, job_id=-1, workload=0, transfer_remaining=0):
        self.id: int = job_id
        self.workload: int = workload
        self.transfer_remaining: int = transfer_remaining
        self.status: JobStatus = JobStatus.WAITING
        self.wait_ticks: int = 0
        self.resource = None

    def __str__(self):
        return (
            f'Job<{self.id}, {self.status.name}, workload={self.workload}, '
            f'transfer={self.transfer_remaining}, wait={self.wait_ticks}>'
        )

    __repr__ = __str__

    @property
    def waiting(self) -> bool:
        """Whether this job is currently accumulating wait time."""
        return self.status in WAIT_STATES

    @property
    def done(self) -> bool:
        return self.status == JobStatus.DONE

    def assign(self, resource: 'Resource', status: JobStatus) -> None:
        """Binds this job to a resource, leaving the `WAITING` state.

        Parameters
        ----------
            resource : Resource
                The resource that will run this job
            status : JobStatus
                The first state after matching (`SENDING` for mixed
                scheduling, `WAITING_TO_SEND` for advance reservations)
        """
        if self.status != JobStatus.WAITING:
            raise AssertionError(f'Tried to assign already matched {self}')
        self.resource = resource
        self.status = status


class JobParameters:
    """Class for using with generative models for job creation.

    Jobs have a uniformly distributed workload and a uniformly distributed
    number of data transfer ticks. A user of this class must specify all
    bounds.

    Parameters
    ----------
        lower_workload_bound : int
            The minimum workload of a job
        upper_workload_bound : int
            The maximum workload of a job
        lower_transfer_bound : int
            The minimum number of data transfer ticks of a job
        upper_transfer_bound : int
            The maximum number of data transfer ticks of a job

    Used by :class:`dynsched.workload.UniformPopulationGenerator`.
    """

    lower_workload_bound: int
    upper_workload_bound: int
    lower_transfer_bound: int
    upper_transfer_bound: int

    @staticmethod
    def _validate_parameters(lower_workload, upper_workload,
                             lower_transfer, upper_transfer):
        if lower_workload <= 0:
            raise AssertionError('Unable to work with non-positive workloads.')
        if lower_transfer < 0:
            raise AssertionError('Unable to work with negative transfers.')
        if lower_workload > upper_workload or lower_transfer > upper_transfer:
            raise AssertionError('Lower bounds must not exceed upper bounds.')

    def __init__(
        self,
        lower_workload_bound: int,
        upper_workload_bound: int,
        lower_transfer_bound: int,
        upper_transfer_bound: int,
    ):
        self._validate_parameters(
            lower_workload_bound,
            upper_workload_bound,
            lower_transfer_bound,
            upper_transfer_bound,
        )

        self.lower_workload_bound = lower_workload_bound
        self.upper_workload_bound = upper_workload_bound
        self.lower_transfer_bound = lower_transfer_bound
        self.upper_transfer_bound = upper_transfer_bound

    def sample(self, job_id: int, random_source: 'RandomSource') -> Job:
        """Samples a new job.

        Parameters
        ----------
            job_id : int
                The identifier of the new job
            random_source : RandomSource
                Where to draw the workload and transfer ticks from
        """
        workload = random_source.randint(
            self.lower_workload_bound, self.upper_workload_bound
        )
        transfer = random_source.randint(
            self.lower_transfer_bound, self.upper_transfer_bound
        )
        return Job(job_id, workload, transfer)
