###############################################################################
#####                             MAIN PROGRAM                            #####
###############################################################################
import argparse
import sys

import numpy as np
import scipy.linalg

from simple_iteration import config
from simple_iteration import logger
from simple_iteration import systemIO as IO
from simple_iteration.convergence import STOP_RULES
from simple_iteration.dumpMat import dumpMatrix, dumpResiduals, dumpVector
from simple_iteration.errors import InvalidInputError, NonConvergenceError, PreconditionError
from simple_iteration.residual import sumSquares
from simple_iteration.simpleIter import simpleIter


def createParser():
    parser = argparse.ArgumentParser(
        prog='simple-iteration',
        description='Solve A x = b by the simple iteration method x = alpha x + beta.')
    parser.add_argument('--input', '-i', help='Augmented matrix [A | b] file, one row per line '
                        '(default: built-in 3x3 system)')
    parser.add_argument('--eps', type=IO.parseTolerance,
                        help='Accuracy eps (prompted for when missing)')
    parser.add_argument('--rule', choices=sorted(STOP_RULES), default=config.STOP_RULE,
                        help='Stopping rule (default: %(default)s)')
    parser.add_argument('--max-iter', type=int, default=config.MAX_ITER,
                        help='Maximum number of iterations (default: %(default)s)')
    parser.add_argument('--digits', type=int, default=config.OUTPUT_DIGITS,
                        help='Decimals in the printed tables (default: %(default)s)')
    parser.add_argument('--verbose', '-v', type=int, default=config.VERBOSE,
                        help='Verbosity, 0 quiet ... 5 debug (default: %(default)s)')
    parser.add_argument('--compare', action='store_true',
                        help='Also solve with scipy.linalg.solve and print the difference')
    parser.add_argument('--plot', action='store_true', help='Plot the convergence history')
    return parser


def main(argv=None, stdin=None, stdout=None):
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    args = createParser().parse_args(argv)
    log = logger.Logger(stdout, args.verbose)

    # --------------------------------------------------------------------------
    # System
    try:
        if args.input is None:
            A, b = IO.defaultSystem()
        else:
            A, b = IO.readSystem(args.input)
    except (OSError, ValueError) as e:
        log.error('%s', e)
        return 1

    dumpMatrix(stdout, A, 'Matrix', digits=args.digits)
    dumpVector(stdout, b, 'Original Beta Vector', digits=args.digits)

    if args.eps is None:
        try:
            tol = IO.readTolerance(stdin, stdout)
        except InvalidInputError as e:
            log.error('%s', e)
            return 1
    else:
        tol = args.eps

    # --------------------------------------------------------------------------
    # Solve
    try:
        solver = simpleIter(A, b, verbose=log)
    except PreconditionError as e:
        log.error('%s', e)
        return 1

    dumpMatrix(stdout, solver.alpha, 'Alpha Matrix', digits=args.digits)
    dumpVector(stdout, solver.beta, 'Beta Vector', digits=args.digits)

    try:
        solver.solve(tol, maxIter=args.max_iter, rule=args.rule)
        status = 0
    except NonConvergenceError as e:
        log.error('%s', e)
        status = 2
    except ValueError as e:
        log.error('%s', e)
        return 1

    dumpVector(stdout, solver.sol, 'Solution' if solver.converged else 'Last iterate',
               digits=args.digits)
    dumpResiduals(stdout, solver.res)
    log.info('Sum of squared residuals = %E', sumSquares(solver.res))

    # --------------------------------------------------------------------------
    if args.compare:
        solExact = scipy.linalg.solve(solver.A, solver.b)
        dumpVector(stdout, solExact, 'Exact Solution', digits=args.digits)
        log.note('||sol - sol_ex||_inf = %E', np.linalg.norm(solver.sol - solExact, ord=np.inf))
        log.note('||sol - sol_ex||_2   = %E', np.linalg.norm(solver.sol - solExact, ord=2))

    if args.plot:
        import matplotlib.pyplot as plt
        from simple_iteration.plot import plotHistory
        plotHistory(solver.history)
        plt.show()

    return status


if __name__ == '__main__':
    sys.exit(main())
