###############################################################################
#####                          STOPPING CRITERIA                          #####
###############################################################################
'''
Stopping rules for the simple iteration.

A rule is a function ``rule(norm, alphaNorm, tol) -> bool`` where ``norm`` is
||x_k - x_{k-1}||_2 and ``alphaNorm`` is the Frobenius norm of alpha.

literal
    threshold = (1 - ||alpha||/||alpha||) * tol.  The threshold is exactly 0
    for any non-zero alpha, so the rule only stops on a repeated iterate.
    For alpha == 0 the threshold is 0/0 = NaN and the rule never stops.

corrected
    threshold = (1 - ||alpha||)/||alpha|| * tol, the usual a-posteriori bound
    ||x_k - x*|| <= ||alpha||/(1 - ||alpha||) ||x_k - x_{k-1}|| <= tol.
    For alpha == 0 the first iterate is exact and the rule stops.  For
    ||alpha|| >= 1 the threshold is <= 0 and only a repeated iterate stops.
'''

import numpy as np

from simple_iteration import config


def alphaNorm(alpha):
    return float(np.linalg.norm(np.asarray(alpha, dtype=float).ravel()))


def stepNorm(x, prevX):
    return float(np.linalg.norm(np.asarray(x) - np.asarray(prevX)))


def literal(norm, alphaNorm, tol):
    if (alphaNorm == 0.0):
        return False # NaN threshold
    rhs = (1.0 - alphaNorm / alphaNorm) * tol
    return norm <= rhs


def corrected(norm, alphaNorm, tol):
    if (alphaNorm == 0.0):
        return True
    rhs = (1.0 - alphaNorm) / alphaNorm * tol
    # rhs < 0 for ||alpha|| > 1, a repeated iterate is still a fixed point
    return norm <= rhs or norm == 0.0


STOP_RULES = {
    'literal'   : literal,
    'corrected' : corrected,
}


def getStopRule(rule=None):
    if rule is None:
        rule = config.STOP_RULE
    if callable(rule):
        return rule
    try:
        return STOP_RULES[rule]
    except KeyError:
        raise ValueError('Unknown stopping rule %r, choose one of %s'
                         % (rule, ', '.join(sorted(STOP_RULES))))


def hasConverged(x, prevX, alpha, tol, rule=None):
    stop = getStopRule(rule)
    return bool(stop(stepNorm(x, prevX), alphaNorm(alpha), tol))
