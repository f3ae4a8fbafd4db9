"""Simulation core: grid model, neighborhood, rules and stepping."""

from .grid import Cell, Grid, empty_grid, get, set_alive, place, is_alive
from .neighborhood import NEIGHBOR_OFFSETS, neighbor_coords, alive_neighbor_count
from .conway_rules import RULE_STRING, SURVIVAL_SET, BIRTH_SET, next_state, rule_table
from .stepper import step, evolve

__all__ = [
    'Cell',
    'Grid',
    'empty_grid',
    'get',
    'set_alive',
    'place',
    'is_alive',
    'NEIGHBOR_OFFSETS',
    'neighbor_coords',
    'alive_neighbor_count',
    'RULE_STRING',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'next_state',
    'rule_table',
    'step',
    'evolve',
]
