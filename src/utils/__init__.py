"""
Utilities module for the ranking package.
"""
from src.utils.constants import (
    FIRST_WEEK, DEFAULT_INCREMENT, DEFAULT_MAX_RANK, INITIAL_RANK,
    ELO_SCALE, DEFAULT_K_FACTOR, DEFAULT_POINT_WEIGHT,
    WIN, TIE, LOSS
)

__all__ = [
    'FIRST_WEEK', 'DEFAULT_INCREMENT', 'DEFAULT_MAX_RANK', 'INITIAL_RANK',
    'ELO_SCALE', 'DEFAULT_K_FACTOR', 'DEFAULT_POINT_WEIGHT',
    'WIN', 'TIE', 'LOSS'
]
