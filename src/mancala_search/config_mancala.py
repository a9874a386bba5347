"""
Configuration for the mancala search engine and its command line.
"""

# Board Configuration
BOARD_CONFIG = {
    'pits_per_side': 6,                 # 6 pits + 1 store per player = 14 cells
    'seeds_per_pit': 4,                 # Standard opening: 48 seeds in play
}

# Search Configuration
SEARCH_CONFIG = {
    'max_depth': 30,                    # Deepest iterative deepening iteration
    'time_limit_ms': 0,                 # 0 = search until max_depth or interrupted
    'use_transposition_table': True,
}

# Command-line Configuration
CLI_CONFIG = {
    'log_level': 'WARNING',             # --verbose switches to DEBUG
    'log_format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
}
