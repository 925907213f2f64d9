import numpy as np

from numba import njit

from algorithms.matrix_multiplication.validation import validate_for_multiplication
from constants.params import DATA_TYPE


@njit(cache=True, boundscheck=True)
def dense_multiply_kernel(A, B, C):
    m, n = A.shape
    p = B.shape[1]

    for i in range(m):
        for j in range(p):
            for k in range(n):
                C[i, j] += A[i, k] * B[k, j]

    return C


def multiply(left, right):
    """
    Dense single-threaded product of left (R x K) and right (K x C).

    Performs no validation: call validate_for_multiplication first. Cells are
    accumulated in DATA_TYPE and wrap on overflow. Mismatched shapes surface
    as an IndexError from the bounds-checked kernel.
    """
    A = np.asarray(left, dtype=DATA_TYPE)
    B = np.asarray(right, dtype=DATA_TYPE)

    C = np.zeros((A.shape[0], B.shape[1]), dtype=DATA_TYPE)
    return dense_multiply_kernel(A, B, C)


def validate_and_multiply(left, right):
    validate_for_multiplication(left, right)
    return multiply(left, right)
