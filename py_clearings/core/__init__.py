"""
Core clearing map generation functionality.
"""

from .alea_prng import AleaPRNG
from .layouts import MalformedLayoutError, MapLayout, PathSpec, parse_path, path_key
from .name_generator import ClearingNameGenerator
from .path_solver import InvalidSettingsError, build_candidate_index, run_attempt, solve_paths

__all__ = ['AleaPRNG', 'MalformedLayoutError', 'MapLayout', 'PathSpec', 'parse_path', 'path_key',
           'ClearingNameGenerator', 'InvalidSettingsError', 'build_candidate_index',
           'run_attempt', 'solve_paths']
