#!/usr/bin/env python
# -*- coding: utf-8 -*-

"reservation_scheduler - Advance reservation scheduling"

from typing import Optional

from dynsched.cluster import Cluster
from dynsched.job import Job, JobStatus
from dynsched.resource import Resource, ResourceStatus
from dynsched.scheduler.scheduler import Scheduler, Match


class ReservationScheduler(Scheduler):
    """An advance reservation scheduler.

    Jobs are taken in submission order and committed to the reservation
    queue of the accepting resource with the least committed workload. Each
    resource then works through its queue in order, overlapping the data
    transfer of the next job with the execution of the current one (see
    :class:`dynsched.engine.ReservationExecutionEngine`).
    """

    def select(self, cluster: Cluster) -> Optional[Match]:
        job = cluster.jobs.first(lambda j: j.status == JobStatus.WAITING)
        if job is None:
            return None

        best_resource = None
        for resource in cluster.resources:
            if not resource.accepting:
                continue
            if best_resource is None or \
                    resource.committed_workload < best_resource.committed_workload:
                best_resource = resource
        if best_resource is None:
            return None
        return job, best_resource

    def assign(self, job: Job, resource: Resource) -> None:
        job.assign(resource, JobStatus.WAITING_TO_SEND)
        resource.reserve(job)
        resource.status = ResourceStatus.HAS_JOBS
