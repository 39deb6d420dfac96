"""Global Routine Invariants - Single Source of Truth.

This module defines the constants every normalizer, partitioner and
analyzer reads. Components import from here - nowhere else.

ARCHITECTURAL COMMITMENT: SETS AS THE PLANNING CURRENCY
=======================================================
Prescribed sets are the only quantity the partitioner balances.
Muscle volume is always derived: volume = sets x role weight.

No component is allowed to invent volume.
"""

# Weekly frequency bounds (training days per week)
MIN_FREQUENCY = 2
MAX_FREQUENCY = 7

# Primary muscle label for exercises with no primary tag
UNASSIGNED_MUSCLE = "Unassigned"

# Day naming
DAY_NAME_TEMPLATE = "Day {number}"
REST_DAY_FOCUS = "Rest"

# Normalizer defaults
DEFAULT_SETS = 1
DEFAULT_REST_SECONDS = 0
DEFAULT_REPS = ""

# Muscle role weights (PRIMARY)
# Fixed so that analytics are reproducible between runs
PRIMARY_WEIGHT = 1.0
SECONDARY_WEIGHT = 0.5
TERTIARY_WEIGHT = 0.25

# Balance classification (percentage points between top and smallest non-zero muscle)
BALANCED_MAX_SPREAD = 15.0
MODERATE_MAX_SPREAD = 30.0

# Recommendation bounds (percentage of total program volume)
COVERAGE_FLOOR_PCT = 5.0
DOMINANCE_CEILING_PCT = 40.0
MAX_RECOMMENDATIONS = 5

# Exercise-count spread allowed between the busiest and the lightest day
MAX_DAY_EXERCISE_SPREAD = 1

# Volume status band width, in population standard deviations around the mean
VOLUME_STATUS_BAND_SD = 1.0
