###############################################################################
#####                  DECOMPOSITION  x = alpha x + beta                  #####
###############################################################################

import numpy as np

from simple_iteration.errors import PreconditionError, ZeroDiagonalError


def checkSystem(A, b):
    '''Validate the system and return (A, b) as float arrays, b flattened.

    Raises:
        PreconditionError : A not square, b of the wrong size, empty or
            non-finite entries.
        ZeroDiagonalError : some A[i][i] == 0.
    '''
    A = np.array(A, dtype=float)
    b = np.array(b, dtype=float)

    if (A.ndim != 2 or A.shape[0] != A.shape[1]):
        raise PreconditionError('A must be a square matrix, got shape %s' % (A.shape,))
    n = A.shape[0]
    if (n == 0):
        raise PreconditionError('Empty system')

    if (b.ndim == 2 and b.shape[1] == 1): b = b.reshape(b.shape[0]) # Column vector
    if (b.ndim != 1 or b.size != n):
        raise PreconditionError('b must be a vector of length %d, got shape %s' % (n, b.shape))

    if (not np.all(np.isfinite(A))):
        raise PreconditionError('A contains non-finite entries')
    if (not np.all(np.isfinite(b))):
        raise PreconditionError('b contains non-finite entries')

    D = A.diagonal()
    zeros = np.where(D == 0.0)[0]
    if (zeros.size > 0):
        raise ZeroDiagonalError(int(zeros[0]))
    return A, b


def decompose(A, b):
    '''Rewrite A x = b as x = alpha x + beta.

    alpha[i,j] = -A[i,j]/A[i,i] for i != j, alpha[i,i] = 0
    beta[i]    =  b[i]/A[i,i]
    '''
    A, b = checkSystem(A, b)
    n = b.size
    D = A.diagonal()

    alpha = np.zeros((n,n))
    beta  = np.zeros(n)
    with np.errstate(over='ignore'):
        for i in range(n):
            alpha[i,:] = -A[i,:] / D[i]
            alpha[i,i] = 0.0
            beta[i]    = b[i] / D[i]

    if (not (np.all(np.isfinite(alpha)) and np.all(np.isfinite(beta)))):
        # Overflow on tiny diagonal entries
        raise PreconditionError('Decomposition overflows, diagonal of A too small')
    return alpha, beta


def iterationStep(alpha, beta, x):
    '''One pass of the fixed point map: beta + alpha x.
    Uses the full previous iterate x (Jacobi update).'''
    return beta + alpha @ x
