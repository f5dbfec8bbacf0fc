###############################################################################
#####                       SIMPLE ITERATION SOLVER                       #####
###############################################################################

import numbers
import time

import numpy as np

from simple_iteration import config
from simple_iteration import logger
from simple_iteration.convergence import alphaNorm, getStopRule, stepNorm
from simple_iteration.decompose import checkSystem, decompose, iterationStep
from simple_iteration.errors import NonConvergenceError
from simple_iteration.residual import residuals


def checkTolerance(tol):
    if (isinstance(tol, bool) or not isinstance(tol, numbers.Real)):
        raise ValueError('Tolerance must be a real number, got %r' % (tol,))
    tol = float(tol)
    if (np.isnan(tol) or tol < 0.0):
        raise ValueError('Tolerance must be >= 0, got %r' % tol)
    return tol


def checkMaxIter(maxIter):
    if maxIter is None:
        maxIter = config.MAX_ITER
    if (isinstance(maxIter, bool) or not isinstance(maxIter, numbers.Integral) or maxIter < 1):
        raise ValueError('maxIter must be a positive integer, got %r' % (maxIter,))
    return int(maxIter)


def iterate(alpha, beta, tol, maxIter=None, rule=None, x0=None, callback=None,
            verbose=None):
    '''Fixed point iteration x_{k+1} = beta + alpha x_k.

    Args:
        alpha : (n,n) array, iteration matrix
        beta : (n,) array, iteration offset
        tol : float >= 0, tolerance handed to the stopping rule

    Kwargs:
        maxIter : int
            Passes before giving up, config.MAX_ITER by default.
        rule : str or function(norm, alphaNorm, tol) => bool
            Stopping rule, see :mod:`simple_iteration.convergence`.
        x0 : (n,) array
            Initial guess, zero vector by default.
        callback : function(k, x) => None
            Called after every pass with the pass number and the iterate.
        verbose : int or Logger

    Returns:
        (x, numIter, history) where history holds ||x_k - x_{k-1}|| of
        every pass.

    Raises:
        NonConvergenceError : after maxIter passes.
    '''
    log = logger.new_logger(verbose)
    tol = checkTolerance(tol)
    maxIter = checkMaxIter(maxIter)
    stop = getStopRule(rule)

    alpha = np.asarray(alpha, dtype=float)
    beta  = np.asarray(beta, dtype=float).ravel()
    n = beta.size
    normA = alphaNorm(alpha)
    log.debug('  > ||alpha|| = %g , tol = %g , maxIter = %d', normA, tol, maxIter)
    if (normA >= 1.0):
        log.warn('||alpha|| = %g >= 1, the iteration may not converge', normA)

    if x0 is None:
        prevX = np.zeros(n)
    else:
        prevX = np.array(x0, dtype=float).ravel()
        if (prevX.size != n):
            raise ValueError('x0 must have length %d, got %d' % (n, prevX.size))

    history = []
    for k in range(1, maxIter+1):
        x = iterationStep(alpha, beta, prevX)
        norm = stepNorm(x, prevX)
        history.append(norm)

        log.info('    > Iteration %d: x = %s , ||x - prevX|| = %.6e', k, x, norm)
        if callable(callback):
            callback(k, x.copy())

        if stop(norm, normA, tol):
            log.debug('  > Converged after %d iterations', k)
            return x, k, history
        prevX = x.copy()

    raise NonConvergenceError(x, maxIter, history)


class simpleIter():
    def __init__(self, A, b, verbose=None):
        self.A, self.b = checkSystem(A, b)
        self.n = self.b.size
        self.log = logger.new_logger(verbose)

        self.alpha, self.beta = decompose(self.A, self.b)
        self.alphaNorm = alphaNorm(self.alpha)
        self.log.debug('  > alpha = \n%s', self.alpha)
        self.log.debug('  > beta  = %s', self.beta)

        self.converged = False
        self.numIter   = 0
        self.history   = []
        self.sol       = None
        self.res       = None
        self.residual  = -1
        return


    def solve(self, tol, maxIter=None, rule=None, x0=None, callback=None):
        self.log.note('  > STARTING CONVERGENCE LOOP')
        wall0 = time.perf_counter()
        try:
            xk, k, history = iterate(self.alpha, self.beta, tol, maxIter=maxIter,
                                     rule=rule, x0=x0, callback=callback,
                                     verbose=self.log)
        except NonConvergenceError as e:
            self.log.warn('%s', e)
            self.setResult(e.x, e.numIter, e.history, False)
            raise

        self.setResult(xk, k, history, True)
        self.log.timer('simple iteration', wall0)
        self.log.note('  > Converged = %s , Num Iter = %d , Residual = %.6e',
                      self.converged, self.numIter, self.residual)
        return self.sol


    def setResult(self, x, numIter, history, converged):
        self.sol       = x
        self.numIter   = numIter
        self.history   = history
        self.converged = converged
        self.res       = residuals(self.A, self.b, x)
        self.residual  = float(np.linalg.norm(self.res))


def solve(A, b, tol, **kwargs):
    '''Solve A x = b by simple iteration and return x.

    >>> solve([[4., 1.], [1., 3.]], [1., 2.], 1e-10)
    array([0.09090909, 0.63636364])
    '''
    verbose = kwargs.pop('verbose', logger.WARN)
    return simpleIter(A, b, verbose=verbose).solve(tol, **kwargs)
