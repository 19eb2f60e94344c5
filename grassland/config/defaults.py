"""Default simulation constants.

The values here decide how fast the population grows or collapses. Food
scarcity is what makes movement genes matter: with too much grass every
lineage survives, with too little none do.
"""

# =============================================================================
# MAP
# =============================================================================
MAP_WIDTH = 20
MAP_HEIGHT = 20

# "bounded" keeps animals inside all four edges; "globe" wraps east-west.
TOPOLOGY = "bounded"

# =============================================================================
# POPULATION AND GRASS
# =============================================================================
STARTING_ANIMAL_AMOUNT = 20
STARTING_GRASS_AMOUNT = 40
DAILY_GRASS_GROWTH = 8  # Equator cells are filled first, see GridWorld.grow_grass

# =============================================================================
# ENERGY
# =============================================================================
STARTING_ENERGY = 50
ENERGY_TO_MOVE = 1  # Paid on every move, including blocked ones
ENERGY_FROM_EATING = 10
ENERGY_TO_REPRODUCE = 15  # Paid by each parent; the child starts with both payments
ENERGY_TO_FULL = 30  # Both parents need at least this much to mate

# =============================================================================
# GENETICS
# =============================================================================
GENOME_LENGTH = 8
MIN_MUTATIONS = 0
MAX_MUTATIONS = 2
GENE_VALUES = 8  # One gene is a clockwise turn of 0..7 eighths

# =============================================================================
# PACING
# =============================================================================
DAY_INTERVAL = 0.7  # Seconds between days when run in real time
SEPARATOR_WIDTH = 60
