#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""cluster - The set of resources and jobs managed by the simulator.

A :class:`Cluster` owns two :class:`dynsched.pool.EntityPool` objects: one for
resources and one for jobs. Resources and jobs are only ever removed from
their pools once they are fully disengaged, meaning no reservation queue or
running job still refers to them.
"""

import logging
from typing import List, Optional

from .job import Job, JobParameters, JobStatus
from .pool import EntityPool
from .random_source import RandomSource
from .resource import Resource, ResourceParameters, ResourceStatus

logger = logging.getLogger(__name__)


class Cluster:
    """A dynamic pool of compute resources and the jobs submitted to it.

    Parameters
    ----------
        random_source : RandomSource
            Where to draw resource levels and job characteristics from
        resource_parameters : ResourceParameters
            Bounds for the level of new resources
        job_parameters : JobParameters
            Bounds for the workload and transfer ticks of new jobs
    """

    resources: EntityPool[Resource]
    jobs: EntityPool[Job]

    def __init__(self, random_source: RandomSource,
                 resource_parameters: ResourceParameters,
                 job_parameters: JobParameters):
        self.random_source = random_source
        self.resource_parameters = resource_parameters
        self.job_parameters = job_parameters

        self.resources = EntityPool()
        self.jobs = EntityPool()
        self.resources_added = 0
        self.jobs_submitted = 0

    def add_resource(self) -> Optional[Resource]:
        """Creates a new resource and appends it to the resource pool.

        Returns:
            The new resource, or None when creation had to be abandoned.
        """
        try:
            resource = self.resource_parameters.sample(
                self.resources_added + 1, self.random_source
            )
        except MemoryError:
            logger.warning('Unable to create resource, skipping this tick')
            return None
        self.resources.append(resource)
        self.resources_added += 1
        logger.debug('Added %s', resource)
        return resource

    def add_job(self) -> Optional[Job]:
        """Creates a new `WAITING` job and appends it to the job pool.

        Returns:
            The new job, or None when creation had to be abandoned.
        """
        try:
            job = self.job_parameters.sample(
                self.jobs_submitted + 1, self.random_source
            )
        except MemoryError:
            logger.warning('Unable to create job, skipping this tick')
            return None
        self.jobs.append(job)
        self.jobs_submitted += 1
        logger.debug('Submitted %s', job)
        return job

    def _queued_job_ids(self):
        return {
            job.id for r in self.resources for job in r.queued_jobs
        }

    def remove_done_jobs(self) -> List[Job]:
        """Removes every `DONE` job from the job pool."""
        if any(r.reservations for r in self.resources):
            queued = self._queued_job_ids()
            for job in self.jobs:
                if job.done and job.id in queued:
                    raise AssertionError(
                        f'Tried to remove {job} while it is still reserved'
                    )
        removed = self.jobs.remove_matching(lambda j: j.done)
        for job in removed:
            logger.debug('Removed %s', job)
        return removed

    def remove_departed_resources(self) -> List[Resource]:
        """Removes every resource that is leaving and holds no reservation."""
        for resource in self.resources:
            if resource.status == ResourceStatus.LEAVING \
                    and resource.reservations:
                raise AssertionError(
                    f'Tried to remove {resource} with pending reservations'
                )
        removed = self.resources.remove_matching(lambda r: r.disengaged)
        for resource in removed:
            logger.debug('Removed %s', resource)
        return removed

    @property
    def waiting_jobs(self) -> List[Job]:
        """The jobs not yet matched with a resource, in pool order."""
        return [j for j in self.jobs if j.status == JobStatus.WAITING]

    def check_invariants(self) -> None:
        """Checks the consistency of pools, assignments and reservations.

        Raises:
            AssertionError: when any invariant does not hold.
        """
        pooled = {r.id for r in self.resources}
        for job in self.jobs:
            assigned = job.resource is not None
            if assigned == (job.status == JobStatus.WAITING):
                raise AssertionError(
                    f'{job} has inconsistent resource assignment'
                )
            if job.status not in (JobStatus.WAITING, JobStatus.DONE) \
                    and job.resource.id not in pooled:
                raise AssertionError(f'{job} runs on a removed resource')

        queued_ids = set()
        for resource in self.resources:
            committed = 0
            for job in resource.queued_jobs:
                if job.done:
                    raise AssertionError(
                        f'{resource} holds a reservation for {job}'
                    )
                if job.id in queued_ids:
                    raise AssertionError(f'{job} reserved more than once')
                if job.resource is not resource:
                    raise AssertionError(
                        f'{job} reserved on {resource} but assigned elsewhere'
                    )
                queued_ids.add(job.id)
                committed += job.workload
            if committed != resource.committed_workload:
                raise AssertionError(
                    f'{resource} committed workload {resource.committed_workload}'
                    f' differs from queued workload {committed}'
                )
            if resource.status == ResourceStatus.LEAVING \
                    and resource.reservations:
                raise AssertionError(f'{resource} leaving with reservations')

    def __repr__(self):
        return (
            f'Cluster(resources={len(self.resources)}, '
            f'jobs={len(self.jobs)})'
        )
