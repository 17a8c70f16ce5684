#!/usr/bin/env python
# -*- coding: utf-8 -*-

"cli - Command line interface for running simulations."

import argparse
import logging

from .config import SchedulingPolicy, SimulationConfig
from .simulator import Simulator

logger = logging.getLogger(__name__)


def build_argument_parser():
    parser = argparse.ArgumentParser(
        description='Simulates job scheduling on a dynamic cluster'
    )
    parser.add_argument('--config', type=str, default=None, metavar='PATH',
                        help='JSON file with simulation parameters')
    parser.add_argument('--policy', type=SchedulingPolicy.from_str,
                        default=None, metavar='POLICY',
                        help='scheduling policy: mixed or ar')
    parser.add_argument('--max-jobs', type=int, default=None, metavar='N',
                        help='number of completed jobs ending the simulation')
    parser.add_argument('--record-interval', type=int, default=None,
                        metavar='N',
                        help='completed jobs between metrics records')
    parser.add_argument('--interval', type=float, default=None, metavar='S',
                        help='seconds to wait between ticks')
    parser.add_argument('--seed', type=int, default=None, metavar='S',
                        help='random seed to use')
    parser.add_argument('--output', type=str, default=None, metavar='PATH',
                        help='metrics log to append records to')
    parser.add_argument('--max-ticks', type=int, default=None, metavar='N',
                        help='stop after N ticks even if jobs remain')
    parser.add_argument('--plot', type=str, default=None, metavar='PATH',
                        help='plots the metrics log to an image when done')
    parser.add_argument('--debug', action='store_true', default=False,
                        help='verbose logging and per-tick consistency checks')
    return parser


def build_config(args) -> SimulationConfig:
    "Merges the optional JSON file with command line overrides."
    overrides = {
        'policy': args.policy,
        'max_jobs': args.max_jobs,
        'record_interval': args.record_interval,
        'interval': args.interval,
        'seed': args.seed,
        'output': args.output,
    }
    if args.config is not None:
        return SimulationConfig.from_json(args.config, **overrides)
    return SimulationConfig(**overrides)


def main(argv=None):
    args = build_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    config = build_config(args)
    logger.info('Starting simulation with %s', config)
    simulator = Simulator.make(config, check_invariants=args.debug)
    stats = simulator.run(args.max_ticks)
    logger.info(
        'Finished after %d ticks: %d jobs done, mean usage %.2f%%, '
        'mean wait %.2f, %d jobs submitted',
        simulator.current_time, *stats
    )

    if args.plot is not None:
        from .render import plot_records
        plot_records(config.output, args.plot)
    return stats
