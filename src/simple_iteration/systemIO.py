###############################################################################
#####                      SYSTEM AND TOLERANCE INPUT                     #####
###############################################################################

import math
import re

import numpy as np

from simple_iteration.errors import InvalidInputError, PreconditionError

# Plain decimal or scientific notation, '.' as decimal separator
_DECIMAL = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')

PROMPT = "Enter accuracy 'eps': "
REPROMPT = 'Invalid input. Please enter a numerical value for accuracy eps: '


def defaultSystem():
    A = np.array([[4.00, 0.24, -0.08],
                  [0.09, 3.00,  0.15],
                  [0.04, 0.08,  4.00]])
    b = np.array([8., 9., 20.])
    return A, b


def readSystem(filename):
    '''Read an augmented matrix [A | b], one row per line, whitespace
    separated.  Lines starting with # are skipped.'''
    data = np.loadtxt(filename, dtype=float, comments='#', ndmin=2)
    n = data.shape[0]
    if (data.shape[1] != n+1):
        raise PreconditionError('%s: expected %d columns for %d rows, got %d'
                                % (filename, n+1, n, data.shape[1]))
    return data[:,:n].copy(), data[:,n].copy()


def parseTolerance(text):
    s = text.strip()
    if not _DECIMAL.match(s):
        raise InvalidInputError('Not a decimal number: %r' % text)
    tol = float(s)
    if (not math.isfinite(tol) or tol < 0.0):
        raise InvalidInputError('Tolerance must be a finite number >= 0, got %r' % text)
    return tol


def readTolerance(stdin, stdout, prompt=PROMPT):
    stdout.write(prompt)
    stdout.flush()
    while True:
        line = stdin.readline()
        if line == '':
            raise InvalidInputError('No tolerance given (end of input)')
        try:
            return parseTolerance(line)
        except InvalidInputError:
            stdout.write(REPROMPT)
            stdout.flush()
