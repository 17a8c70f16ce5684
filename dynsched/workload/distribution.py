#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""distribution - Generative model for cluster population changes"""

import logging

from dynsched.cluster import Cluster
from dynsched.random_source import RandomSource
from dynsched.workload.base import PopulationGenerator

logger = logging.getLogger(__name__)

PER_MILLE = 1000


class UniformPopulationGenerator(PopulationGenerator):
    """A population generator driven by a single per-mille draw per tick.

    At every step, a uniform integer `i` in [1, 1000] is drawn. If `i` is at
    most `add_resource_probability`, a resource joins the cluster. Otherwise,
    if `i` is greater than `add_job_probability`, a job is submitted. Both
    events never happen in the same tick.

    Parameters
    ----------
        random_source : RandomSource
            Source for the per-tick draw
        add_resource_probability : int
            Threshold (per mille) for adding a resource
        add_job_probability : int
            Threshold (per mille) above which a job is added
        initial_resources : int
            Number of resources seeding the cluster on the first step
    """

    def __init__(self, random_source: RandomSource,
                 add_resource_probability: int, add_job_probability: int,
                 initial_resources: int = 5):
        for probability in (add_resource_probability, add_job_probability):
            if not 0 <= probability <= PER_MILLE:
                raise AssertionError(
                    f'Probability {probability} out of [0, {PER_MILLE}]'
                )
        self.random_source = random_source
        self.add_resource_probability = add_resource_probability
        self.add_job_probability = add_job_probability
        self.initial_resources = initial_resources
        self.current_time = 0

    def seed(self, cluster: Cluster) -> None:
        "Adds the initial resources to the cluster."
        for _ in range(self.initial_resources):
            cluster.add_resource()
        logger.debug('Seeded cluster with %d resources', len(cluster.resources))

    def step(self, cluster: Cluster) -> None:
        if self.current_time == 0:
            self.seed(cluster)
        self.current_time += 1

        cluster.remove_done_jobs()
        cluster.remove_departed_resources()

        i = self.random_source.randint(1, PER_MILLE)
        if i <= self.add_resource_probability:
            cluster.add_resource()
        elif i > self.add_job_probability:
            cluster.add_job()
