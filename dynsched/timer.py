#!/usr/bin/env python
# -*- coding: utf-8 -*-

"timer - Pacing between simulation ticks"

import time
from abc import ABC, abstractmethod


class Timer(ABC):
    "Called once after every tick of a simulation."

    @abstractmethod
    def wait(self) -> None:
        """Blocks until the next tick may start."""


class NullTimer(Timer):
    "Runs ticks back to back."

    def wait(self) -> None:
        pass


class IntervalTimer(Timer):
    """Waits a fixed number of seconds between ticks.

    Parameters
    ----------
        interval : float
            Delay between ticks, in seconds
    """

    def __init__(self, interval: float):
        if interval < 0:
            raise ValueError('Interval must not be negative')
        self.interval = interval

    def wait(self) -> None:
        time.sleep(self.interval)
