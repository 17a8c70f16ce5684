#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""workload - Package for generators of load for a cluster.

Generators change the population of a cluster at every time step: they
clear out finished jobs and departed resources, and stochastically bring in
new resources and new jobs.
"""

from .base import PopulationGenerator
from .distribution import UniformPopulationGenerator

__all__ = [
    'PopulationGenerator',
    'UniformPopulationGenerator',
]
