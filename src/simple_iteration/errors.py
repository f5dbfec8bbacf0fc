###############################################################################
#####                            SOLVER ERRORS                            #####
###############################################################################


class SolverError(Exception):
    pass


class PreconditionError(SolverError, ValueError):
    '''The system (A, b) cannot be decomposed: A not square, size
    mismatch with b, empty or non-finite data.'''


class ZeroDiagonalError(PreconditionError, ZeroDivisionError):
    def __init__(self, row):
        self.row = row
        PreconditionError.__init__(self,
            'Zero diagonal entry A[%d][%d], no pivoting is performed' % (row, row))


class NonConvergenceError(SolverError, RuntimeError):
    '''Raised when the stopping test is not met within maxIter passes.

    Attributes:
        x : last iterate
        numIter : number of passes performed
        history : step norms ||x_k - x_{k-1}|| of every pass
    '''
    def __init__(self, x, numIter, history):
        self.x       = x
        self.numIter = numIter
        self.history = history
        if len(history) > 0:
            msg = 'No convergence after %d iterations, last step norm %g' % (numIter, history[-1])
        else:
            msg = 'No convergence after %d iterations' % numIter
        RuntimeError.__init__(self, msg)


class InvalidInputError(SolverError, ValueError):
    pass
