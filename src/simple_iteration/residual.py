###############################################################################
#####                              RESIDUALS                              #####
###############################################################################

import numpy as np


def residuals(A, b, x):
    '''r = b - A x, one component per row of A.'''
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float).ravel()
    x = np.asarray(x, dtype=float).ravel()
    n = b.size
    r = np.zeros(n)
    for i in range(n):
        r[i] = b[i] - A[i,:] @ x
    return r


def sumSquares(r):
    r = np.asarray(r, dtype=float)
    return float(r @ r)


def residualNorm(A, b, x):
    return float(np.sqrt(sumSquares(residuals(A, b, x))))
