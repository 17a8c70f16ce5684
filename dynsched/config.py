#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""config - Runtime configuration of a simulation.

Configurations are built from keyword arguments, with any missing key taking
its default value. Some defaults depend on the scheduling policy.
"""

import enum
import json
from typing import Any, Dict, Optional


class SchedulingPolicy(enum.IntEnum):
    "Enumeration of the available scheduling policies."

    MIXED = 0
    ADVANCE_RESERVATION = 1

    @staticmethod
    def from_str(policy: str) -> 'SchedulingPolicy':
        policy = policy.upper().replace('-', '_')
        policy = POLICY_ALIASES.get(policy, policy)
        if policy in SchedulingPolicy.__members__:
            return SchedulingPolicy[policy]
        raise ValueError(
            f'{policy} is not a valid SchedulingPolicy. '
            f'Valid options are: {list(SchedulingPolicy.__members__.keys())}.'
        )


POLICY_ALIASES = {
    'AR': 'ADVANCE_RESERVATION',
    'RESERVATION': 'ADVANCE_RESERVATION',
}

FCFS_WEIGHT = 1
LWF_WEIGHT = 1
INTERVAL = 0
MAX_JOBS = 100000
RECORD_INTERVAL = 500
LEAVE_PROBABILITY = 300
ADD_RESOURCE_PROBABILITY = 50
INITIAL_RESOURCES = 5
MIN_LEVEL, MAX_LEVEL = 1, 5
MIN_WORKLOAD, MAX_WORKLOAD = 50, 999
MIN_TRANSFER, MAX_TRANSFER = 0, 29

POLICY_DEFAULTS = {
    SchedulingPolicy.MIXED: {
        'add_job_probability': 800,
        'output': 'mixed-sim.out.txt',
    },
    SchedulingPolicy.ADVANCE_RESERVATION: {
        'add_job_probability': 50,
        'output': 'ar-sim.out.txt',
    },
}

DEFAULTS: Dict[str, Any] = {
    'fcfs_weight': FCFS_WEIGHT,
    'lwf_weight': LWF_WEIGHT,
    'interval': INTERVAL,
    'max_jobs': MAX_JOBS,
    'record_interval': RECORD_INTERVAL,
    'leave_probability': LEAVE_PROBABILITY,
    'add_resource_probability': ADD_RESOURCE_PROBABILITY,
    'initial_resources': INITIAL_RESOURCES,
    'min_level': MIN_LEVEL,
    'max_level': MAX_LEVEL,
    'min_workload': MIN_WORKLOAD,
    'max_workload': MAX_WORKLOAD,
    'min_transfer': MIN_TRANSFER,
    'max_transfer': MAX_TRANSFER,
    'seed': None,
}

PER_MILLE_FIELDS = (
    'leave_probability', 'add_resource_probability', 'add_job_probability'
)


class SimulationConfig:
    """Parameters of a simulation.

    Accepts the keys of `DEFAULTS` plus `policy`, `add_job_probability` and
    `output` as keyword arguments. Probabilities are given per mille.
    """

    policy: SchedulingPolicy
    fcfs_weight: int
    lwf_weight: int
    interval: float
    max_jobs: int
    record_interval: int
    leave_probability: int
    add_resource_probability: int
    add_job_probability: int
    initial_resources: int
    min_level: int
    max_level: int
    min_workload: int
    max_workload: int
    min_transfer: int
    max_transfer: int
    output: str
    seed: Optional[int]

    def __init__(self, **kwargs):
        unknown = set(kwargs) - self.fields()
        if unknown:
            raise ValueError(f'Unknown configuration keys: {sorted(unknown)}')

        policy = kwargs.get('policy')
        if policy is None:
            policy = SchedulingPolicy.MIXED
        if isinstance(policy, str):
            policy = SchedulingPolicy.from_str(policy)
        self.policy = SchedulingPolicy(policy)

        for key, default in {**DEFAULTS, **POLICY_DEFAULTS[self.policy]}.items():
            value = kwargs.get(key)
            setattr(self, key, default if value is None else value)
        self._validate()

    @staticmethod
    def fields():
        return set(DEFAULTS) | {'policy', 'add_job_probability', 'output'}

    def _validate(self):
        for key in PER_MILLE_FIELDS:
            if not 0 <= getattr(self, key) <= 1000:
                raise ValueError(f'{key} must be within [0, 1000]')
        if self.max_jobs <= 0:
            raise ValueError('max_jobs must be positive')
        if self.record_interval <= 0:
            raise ValueError('record_interval must be positive')
        if self.interval < 0:
            raise ValueError('interval must not be negative')
        if self.initial_resources < 0:
            raise ValueError('initial_resources must not be negative')
        if self.min_level <= 0:
            raise ValueError('min_level must be positive')
        if self.min_workload <= 0:
            raise ValueError('min_workload must be positive')
        if self.min_transfer < 0:
            raise ValueError('min_transfer must not be negative')
        for name in ('level', 'workload', 'transfer'):
            if getattr(self, f'min_{name}') > getattr(self, f'max_{name}'):
                raise ValueError(f'min_{name} must not exceed max_{name}')

    @classmethod
    def from_json(cls, path, **overrides) -> 'SimulationConfig':
        """Loads a configuration from a JSON object in `path`.

        Keys in `overrides` whose value is not None take precedence over the
        file contents.
        """
        with open(path, 'r') as fp:
            kwargs = json.load(fp)
        if not isinstance(kwargs, dict):
            raise ValueError(f'{path} does not hold a JSON object')
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        ret = {key: getattr(self, key) for key in self.fields()}
        ret['policy'] = self.policy.name.lower()
        return ret

    def __repr__(self):
        return f'SimulationConfig({self.to_dict()})'
