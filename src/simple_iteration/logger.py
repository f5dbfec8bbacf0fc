'''
logger

Verbosity-level logger.  A message is written to ``stdout`` when the
verbosity of the logger is at least the level of the message.  Warnings and
errors are also echoed to stderr.

>>> log = Logger(sys.stdout, INFO)
>>> log.info('Iteration %d', 3)
Iteration 3
'''

import sys
import time

from simple_iteration import config

QUIET  = 0
ERROR  = 1
WARN   = 2
NOTE   = 3
INFO   = 4
DEBUG  = 5

TIMER_LEVEL = DEBUG


class Logger(object):
    def __init__(self, stdout=None, verbose=None):
        if stdout is None:
            stdout = sys.stdout
        if verbose is None:
            verbose = config.VERBOSE
        self.stdout = stdout
        self.verbose = verbose
        self._w0 = time.perf_counter()

    def debug(self, msg, *args):
        debug(self, msg, *args)

    def info(self, msg, *args):
        info(self, msg, *args)

    def note(self, msg, *args):
        note(self, msg, *args)

    def warn(self, msg, *args):
        warn(self, msg, *args)

    def error(self, msg, *args):
        error(self, msg, *args)

    def log(self, msg, *args):
        log(self, msg, *args)

    def timer(self, msg, wall0=None):
        if wall0 is None:
            wall0 = self._w0
        self._w0 = timer(self, msg, wall0)
        return self._w0


def new_logger(verbose=None, stdout=None):
    '''Return ``verbose`` if it is already a Logger, otherwise a new Logger
    with verbosity ``verbose``.'''
    if isinstance(verbose, Logger):
        return verbose
    return Logger(stdout, verbose)


def flush(rec, msg, *args):
    rec.stdout.write(msg % args)
    rec.stdout.write('\n')
    rec.stdout.flush()

def log(rec, msg, *args):
    if rec.verbose > QUIET:
        flush(rec, msg, *args)

def error(rec, msg, *args):
    if rec.verbose >= ERROR:
        flush(rec, 'Error: '+msg, *args)
    if rec.stdout is not sys.stderr:
        sys.stderr.write('Error: ' + (msg % args) + '\n')

def warn(rec, msg, *args):
    if rec.verbose >= WARN:
        flush(rec, 'Warn: '+msg, *args)
        if rec.stdout is not sys.stderr:
            sys.stderr.write('Warn: ' + (msg % args) + '\n')

def note(rec, msg, *args):
    if rec.verbose >= NOTE:
        flush(rec, msg, *args)

def info(rec, msg, *args):
    if rec.verbose >= INFO:
        flush(rec, msg, *args)

def debug(rec, msg, *args):
    if rec.verbose >= DEBUG:
        flush(rec, msg, *args)

def timer(rec, msg, wall0):
    wall1 = time.perf_counter()
    if rec.verbose >= TIMER_LEVEL:
        flush(rec, '    Wall time for %s %9.4f sec', msg, wall1-wall0)
    return wall1
