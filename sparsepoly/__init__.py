"""Sparsepoly is a Python package for sparse univariate integer polynomials.

Polynomials are stored as sparse maps from exponents to nonzero integer
coefficients, kept in descending order of exponents such that the leading
term is always found first. The zero polynomial is represented by the single
term 0x^0.

Addition, subtraction, scalar multiplication, polynomial multiplication and
remaindering by long division are all available via Python's operator
overloading. Multiplication of larger polynomials is spread over a bounded
number of worker threads, each convolving a contiguous chunk of the terms of
the left operand with all terms of the right operand; the partial sums are
merged afterwards, giving the same result as a sequential computation.

Coefficients model fixed-width signed integers (64 bits by default). Python
integers do not wrap around, so coefficients exceeding the configured width
are reported in the log rather than truncated.
"""

__version__ = '0.3.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging

COEFF_BITS = (0, 8, 16, 32, 64)  # supported bit lengths of coefficients, 0 for unbounded


def get_arg_parser():
    """Return parser for command line arguments picked up by sparsepoly."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('sparsepoly configuration')
    group.add_argument('--workers', type=int, metavar='w',
                       help='maximum number of worker threads per multiplication')
    group.add_argument('--parallel-threshold', type=int, metavar='n',
                       help='use worker threads only from n coefficient products onward')
    group.add_argument('--coeff-bits', type=int, metavar='b', choices=COEFF_BITS,
                       help='bit length b of signed coefficients (0 disables overflow notices)')

    group = parser.add_argument_group('sparsepoly logging')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(workers=min(os.cpu_count() or 1, 8), parallel_threshold=1024,
                        coeff_bits=64, log_level='info')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    # NB: environment variables take precedence and are also set for subprocesses
    for name, value in (('SPARSEPOLY_MAXWORKERS', options.workers),
                        ('SPARSEPOLY_THRESHOLD', options.parallel_threshold),
                        ('SPARSEPOLY_COEFFBITS', options.coeff_bits)):
        if not os.getenv(name):
            os.environ[name] = str(value)
    if os.environ['SPARSEPOLY_COEFFBITS'] not in map(str, COEFF_BITS):
        raise ValueError(f'coefficient bit length must be one of {COEFF_BITS}')

    logging.debug(f'Number of worker threads maximum set to {os.getenv("SPARSEPOLY_MAXWORKERS")}')
    logging.debug(f'Parallel threshold set to {os.getenv("SPARSEPOLY_THRESHOLD")} products')
    logging.debug(f'Coefficient bit length set to {os.getenv("SPARSEPOLY_COEFFBITS")}')

    del options, name, value
