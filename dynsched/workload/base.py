#!/usr/bin/env python
# -*- coding: utf-8 -*-

"base - base module for all population generators"

from abc import ABC, abstractmethod

from dynsched.cluster import Cluster


class PopulationGenerator(ABC):
    "An abstract population generator"
    current_time: int

    @abstractmethod
    def step(self, cluster: Cluster) -> None:
        """Steps the population generator by one tick.

        This may, or may not, add resources or jobs to the cluster,
        depending on the internal probability distributions of the
        generator.

        Parameters
        ----------
            cluster : Cluster
                The cluster whose pools should be updated.
        """
