import numpy as np

RUNS = 10

SMALL_MATRIX_SIZE = 50
MID_MATRIX_SIZE = 100
BIG_MATRIX_SIZE = 200

SMALL_ARRAY_LENGTH = 1_000
MID_ARRAY_LENGTH = 10_000
BIG_ARRAY_LENGTH = 100_000

# Fixed-width element type; products and transforms wrap on overflow.
DATA_TYPE = np.int32

RANDOM_SEED = 42
MAX_RANDOM_VALUE = 100

NONE_MATCH_DIVISOR = 10

# filter_values drops values strictly between these bounds
FILTER_LOWER_BOUND = -10
FILTER_UPPER_BOUND = 0
