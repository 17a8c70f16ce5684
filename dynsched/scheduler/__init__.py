#!/usr/bin/env python
# -*- coding: utf-8 -*-

"scheduler - job-to-resource matching policies for the simulation layer."

from .scheduler import Scheduler
from .mixed_scheduler import MixedScheduler
from .reservation_scheduler import ReservationScheduler

__all__ = [
    'Scheduler',
    'MixedScheduler',
    'ReservationScheduler',
]
