###############################################################################
#####                          TABLE PRINTING                             #####
###############################################################################
# Formatting only depends on the arguments, never on the process locale.

import numpy as np

from simple_iteration import config


def fmtNum(v, digits=None):
    '''Fixed point with at most ``digits`` decimals, no trailing zeros.

    >>> fmtNum(-0.06), fmtNum(2.0), fmtNum(1./3)
    ('-0.06', '2', '0.33333')
    '''
    if digits is None:
        digits = config.OUTPUT_DIGITS
    s = '%.*f' % (digits, v)
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    if s == '-0':
        s = '0'
    return s


def dumpMatrix(stdout, A, title='Matrix', digits=None, width=None):
    if width is None:
        width = config.OUTPUT_WIDTH
    A = np.asarray(A)
    stdout.write('%s:\n' % title)
    for row in A:
        stdout.write(' '.join(fmtNum(v, digits).rjust(width) for v in row))
        stdout.write(' \n')
    stdout.write('\n')


def dumpVector(stdout, v, title='Vector', digits=None):
    stdout.write('%s:\n' % title)
    for vi in np.asarray(v).ravel():
        stdout.write('%s\n' % fmtNum(vi, digits))
    stdout.write('\n')


def dumpResiduals(stdout, r, title='Residual Vector'):
    stdout.write('%s:\n' % title)
    for i, ri in enumerate(np.asarray(r).ravel()):
        stdout.write('r%d = %E\n' % (i+1, ri))
