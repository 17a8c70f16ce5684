#!/usr/bin/env python
# -*- coding: utf-8 -*-

"mixed_scheduler - Weighted first-come first-served plus largest-work first"

from typing import Optional

from dynsched.cluster import Cluster
from dynsched.job import Job, JobStatus
from dynsched.resource import Resource, ResourceStatus
from dynsched.scheduler.scheduler import Scheduler, Match


class MixedScheduler(Scheduler):
    """A scheduler mixing FCFS and LWF with configurable weights.

    Each resource runs a single job at a time. The first available resource
    receives the waiting job with the highest score, where

        score = fcfs_weight * wait_ticks + lwf_weight * workload

    Parameters
    ----------
        fcfs_weight : int
            Weight of the time a job has waited
        lwf_weight : int
            Weight of the remaining workload of a job
    """

    def __init__(self, fcfs_weight: int = 1, lwf_weight: int = 1):
        super().__init__()
        self.fcfs_weight = fcfs_weight
        self.lwf_weight = lwf_weight

    def score(self, job: Job) -> int:
        "Computes the priority of a waiting job."
        return self.fcfs_weight * job.wait_ticks + self.lwf_weight * job.workload

    def select(self, cluster: Cluster) -> Optional[Match]:
        resource = cluster.resources.first(
            lambda r: r.status == ResourceStatus.AVAILABLE
        )
        if resource is None:
            return None

        best_job = None
        best_score = 0
        for job in cluster.jobs:
            if job.status != JobStatus.WAITING:
                continue
            score = self.score(job)
            # Ties keep the earliest job.
            if best_job is None or score > best_score:
                best_job, best_score = job, score
        if best_job is None:
            return None
        return best_job, resource

    def assign(self, job: Job, resource: Resource) -> None:
        job.assign(resource, JobStatus.SENDING)
        resource.status = ResourceStatus.RECEIVING_DATA
