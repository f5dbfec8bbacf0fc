###############################################################################
#####                          DEFAULT PARAMETERS                         #####
###############################################################################
'''
Default parameters of the simple-iteration solver.

Every value can be overwritten by an environment variable with the same name
prefixed by ``SIMPLE_ITERATION_``, e.g.

    SIMPLE_ITERATION_MAX_ITER=5000 simple-iteration --eps 1e-6

MAX_ITER
    Maximum number of passes before the solver gives up.
STOP_RULE
    Name of the stopping rule, ``'corrected'`` or ``'literal'``.
VERBOSE
    Logger verbosity (see :mod:`simple_iteration.logger`).
OUTPUT_DIGITS, OUTPUT_WIDTH
    Number of decimals and column width of the printed tables.
'''

import os

ENV_PREFIX = 'SIMPLE_ITERATION_'


def _getenv(name, default, conv=int):
    value = os.environ.get(ENV_PREFIX + name)
    if value is None or value.strip() == '':
        return default
    try:
        return conv(value.strip())
    except ValueError:
        raise ValueError('Invalid value %r for %s%s' % (value, ENV_PREFIX, name))


MAX_ITER      = _getenv('MAX_ITER', 1000)
STOP_RULE     = _getenv('STOP_RULE', 'corrected', str)
VERBOSE       = _getenv('VERBOSE', 4)     # logger.INFO, iteration trace on
OUTPUT_DIGITS = _getenv('OUTPUT_DIGITS', 5)
OUTPUT_WIDTH  = _getenv('OUTPUT_WIDTH', 10)

if MAX_ITER < 1:
    raise ValueError('%sMAX_ITER must be positive, got %d' % (ENV_PREFIX, MAX_ITER))
if STOP_RULE not in ('corrected', 'literal'):
    raise ValueError('%sSTOP_RULE must be corrected or literal, got %r' % (ENV_PREFIX, STOP_RULE))
