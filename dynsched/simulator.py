#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""simulator - Tick-driven simulation of scheduling on a dynamic cluster.

Every tick runs four phases in a fixed order:

    1. the :class:`dynsched.stats.MetricsTracker` accounts for the state left
       by the previous tick;
    2. the :class:`dynsched.workload.PopulationGenerator` removes finished
       jobs and departed resources, and maybe adds a resource or a job;
    3. the :class:`dynsched.engine.ExecutionEngine` advances transfers and
       executions;
    4. the :class:`dynsched.scheduler.Scheduler` matches at most one job.

The simulation ends when the tracker sees the configured number of completed
jobs.
"""

import logging
from typing import Optional

from . import engine as eng, scheduler as sched
from .cluster import Cluster
from .config import SchedulingPolicy, SimulationConfig
from .job import JobParameters
from .random_source import NumpyRandomSource, RandomSource
from .resource import ResourceParameters
from .sink import FileMetricsSink, MetricsSink
from .stats import MetricsTracker, Stats
from .timer import IntervalTimer, NullTimer, Timer
from .workload import PopulationGenerator, UniformPopulationGenerator

logger = logging.getLogger(__name__)


class Simulator:
    """Runs the tick loop over a cluster.

    Use :func:`Simulator.make` to build a simulator from a configuration.

    Parameters
    ----------
        cluster : Cluster
            The resources and jobs being simulated
        generator : PopulationGenerator
            Changes the cluster population every tick
        engine : eng.ExecutionEngine
            Advances transfers and executions every tick
        scheduler : sched.Scheduler
            Matches waiting jobs with resources
        tracker : MetricsTracker
            Accounts for statistics and decides termination
        timer : Timer
            Paces the ticks of :func:`run`
    """

    current_time: int
    cluster: Cluster
    generator: PopulationGenerator
    engine: eng.ExecutionEngine
    scheduler: sched.Scheduler
    tracker: MetricsTracker
    timer: Timer

    def __init__(self, cluster: Cluster, generator: PopulationGenerator,
                 engine: eng.ExecutionEngine, scheduler: sched.Scheduler,
                 tracker: MetricsTracker, timer: Optional[Timer] = None,
                 check_invariants: bool = False):
        self.cluster = cluster
        self.generator = generator
        self.engine = engine
        self.scheduler = scheduler
        self.tracker = tracker
        self.timer = timer if timer is not None else NullTimer()
        self.check_invariants = check_invariants
        self.current_time = 0

    @staticmethod
    def make(config: SimulationConfig,
             random_source: Optional[RandomSource] = None,
             sink: Optional[MetricsSink] = None,
             timer: Optional[Timer] = None,
             check_invariants: bool = False) -> 'Simulator':
        """Factory method for instantiating new simulators.

        Parameters
        ----------
            config : SimulationConfig
                The simulation parameters
            random_source : Optional[RandomSource]
                Source for every stochastic decision. Defaults to a numpy
                source seeded with `config.seed`.
            sink : Optional[MetricsSink]
                Destination of periodic records. Defaults to appending to
                `config.output`.
            timer : Optional[Timer]
                Pacing between ticks. Defaults to `config.interval`.
            check_invariants : bool
                Whether to verify cluster consistency after every tick
        """
        if random_source is None:
            random_source = NumpyRandomSource(config.seed)
        if sink is None:
            sink = FileMetricsSink(config.output)
        if timer is None:
            timer = IntervalTimer(config.interval) if config.interval \
                else NullTimer()

        cluster = Cluster(
            random_source,
            ResourceParameters(config.min_level, config.max_level),
            JobParameters(
                config.min_workload, config.max_workload,
                config.min_transfer, config.max_transfer,
            ),
        )
        generator = UniformPopulationGenerator(
            random_source,
            config.add_resource_probability,
            config.add_job_probability,
            config.initial_resources,
        )
        tracker = MetricsTracker(config.max_jobs, config.record_interval, sink)

        engine: eng.ExecutionEngine
        scheduler: sched.Scheduler
        if config.policy == SchedulingPolicy.MIXED:
            engine = eng.MixedExecutionEngine(
                random_source, config.leave_probability
            )
            scheduler = sched.MixedScheduler(
                config.fcfs_weight, config.lwf_weight
            )
        elif config.policy == SchedulingPolicy.ADVANCE_RESERVATION:
            engine = eng.ReservationExecutionEngine(
                random_source, config.leave_probability
            )
            scheduler = sched.ReservationScheduler()
        else:
            raise RuntimeError(f'Unsupported scheduling policy {config.policy}')

        return Simulator(
            cluster, generator, engine, scheduler, tracker, timer,
            check_invariants,
        )

    @property
    def finished(self) -> bool:
        return self.tracker.finished

    @property
    def stats(self) -> Stats:
        "Current statistics of the simulation."
        return self.tracker.snapshot(self.cluster)

    def step(self) -> bool:
        """Runs one tick of the simulation.

        Returns:
            bool: False when the job quota was reached during this tick, in
            which case the remaining phases of the tick are skipped.
        """
        if self.finished:
            raise RuntimeError('Tried to step a finished simulation')
        self.current_time += 1

        if self.tracker.step(self.cluster, self.current_time):
            logger.info(
                'Reached %d completed jobs at tick %d',
                self.tracker.jobs_done, self.current_time,
            )
            return False
        self.generator.step(self.cluster)
        self.engine.step(self.cluster)
        self.scheduler.schedule(self.cluster)

        if self.check_invariants:
            self.cluster.check_invariants()
        return True

    def run(self, max_ticks: Optional[int] = None) -> Stats:
        """Steps the simulation until the job quota is reached.

        Parameters
        ----------
            max_ticks : Optional[int]
                Stop after this many ticks even if the quota wasn't reached

        Returns:
            Stats: The statistics at the end of the run.
        """
        ticks = 0
        while not self.finished:
            if max_ticks is not None and ticks >= max_ticks:
                break
            if not self.step():
                break
            ticks += 1
            self.timer.wait()
        return self.stats
