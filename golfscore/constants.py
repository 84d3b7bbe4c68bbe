"""Constants for golfscore."""

HOLES_PER_ROUND = 18

# Inclusive hole ranges for the three Nassau matches
SEGMENT_HOLES = {
    'front9': (1, 9),
    'back9': (10, 18),
    'overall': (1, 18),
}

# Segments a press may be laid on
PRESSABLE_SEGMENTS = ('front9', 'back9')

SEGMENT_LABELS = {
    'front9': 'Front 9',
    'back9': 'Back 9',
    'overall': 'Overall',
}

MIN_PAR = 3
MAX_PAR = 6

# Stableford bands: name -> (low, high, points), relative to par.
# None marks an open end.
DEFAULT_STABLEFORD_BANDS = {
    'double_eagle_or_better': (None, -3, 5),
    'eagle': (-2, -2, 4),
    'birdie': (-1, -1, 3),
    'par': (0, 0, 2),
    'bogey': (1, 1, 1),
    'double_bogey_or_worse': (2, None, 0),
}

STABLEFORD_MIN_POINTS = 0
STABLEFORD_MAX_POINTS = 20

ALL_SQUARE = 'All Square'
