'''
Simple iteration (Jacobi type) solver for square linear systems A x = b.

>>> from simple_iteration import simpleIter
>>> solver = simpleIter(A, b)
>>> x = solver.solve(1e-4)
>>> solver.res          # b - A x
'''

__version__ = '1.0.0'

from simple_iteration.errors import (SolverError, PreconditionError, ZeroDiagonalError,
                                     NonConvergenceError, InvalidInputError)
from simple_iteration.decompose import checkSystem, decompose, iterationStep
from simple_iteration.convergence import (alphaNorm, stepNorm, hasConverged,
                                          getStopRule, STOP_RULES)
from simple_iteration.residual import residuals, residualNorm, sumSquares
from simple_iteration.simpleIter import iterate, simpleIter, solve
