"""
Constants shared across the ranking package.
"""

# Weeks are numbered from 1, as in the NFL regular season
FIRST_WEEK = 1

# Baseline seeding: the first team gets DEFAULT_MAX_RANK, each following
# team DEFAULT_INCREMENT less
DEFAULT_INCREMENT = 1.0
DEFAULT_MAX_RANK = 32.0

# Value every Rank starts at before seeding
INITIAL_RANK = 0.0

# Elo
ELO_SCALE = 400.0
DEFAULT_K_FACTOR = 32.0

# Point differential: rank points per point of margin
DEFAULT_POINT_WEIGHT = 0.1

# Game result scores from the home side's perspective
WIN = 1.0
TIE = 0.5
LOSS = 0.0
