#!/usr/bin/env python
# -*- coding: utf-8 -*-

__version__ = '0.1.0'

from .config import SchedulingPolicy, SimulationConfig
from .simulator import Simulator

__all__ = ['SchedulingPolicy', 'SimulationConfig', 'Simulator']
