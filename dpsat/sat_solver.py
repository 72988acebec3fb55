#!/usr/bin/env python3

import argparse
import logging
import os
import sys

from dpsat.branching import HEURISTICS, get_heuristic
from dpsat.dimacs import parse
from dpsat.dp import DP
from dpsat.exceptions import DimacsFormatError

LEVEL = logging.INFO
LOG_FILE = 'dp.log'


def parseArg():
    """
    CMD argument parsing
    :return: the parser
    """
    parser = argparse.ArgumentParser(description='Davis-Putnam SAT solver')
    parser.add_argument('infile', nargs='?', type=argparse.FileType('r'), default=sys.stdin,
                        help='DIMACS CNF file (default: stdin)')
    parser.add_argument('--heuristic', choices=sorted(HEURISTICS), default='max',
                        help='order in which atoms are eliminated')
    parser.add_argument('--seed', type=int, help='seed for the random heuristic')
    parser.add_argument('--strict', action='store_true', help='validate the input against the problem line')
    parser.add_argument('--stats', action='store_true', help='print solver statistics')
    parser.add_argument('--log', default=LOG_FILE, help='log file (default: %(default)s)')
    parser.add_argument('--debug', action='store_true', help='log every intermediate formula')
    parser.add_argument('--batch', nargs=2, metavar=('IN_DIR', 'OUT_DIR'),
                        help='solve IN_DIR/test<i>-in.txt into OUT_DIR/test<i>-out.txt')
    parser.add_argument('--count', type=int, default=10, help='number of batch test files (default: %(default)s)')
    return parser


def solve_stream(infile, outfile, heuristic=None, strict=False, stats=False):
    """Read a problem from infile and write the verdict to outfile"""
    problem = parse(infile, strict)
    solver = DP(heuristic)
    sat = solver.solve(problem.formula)
    outfile.write("true\n" if sat else "false\n")
    if stats:
        for k, v in sorted(solver.stats.items()):
            outfile.write("{}: {}\n".format(k, v))
    return sat


def run_batch(in_dir, out_dir, count=10, heuristic=None, strict=False):
    """Solve test1-in.txt .. test<count>-in.txt; missing inputs are skipped"""
    os.makedirs(out_dir, exist_ok=True)
    done = []
    for i in range(1, count + 1):
        input_file = os.path.join(in_dir, "test{}-in.txt".format(i))
        output_file = os.path.join(out_dir, "test{}-out.txt".format(i))
        if not os.path.isfile(input_file):
            continue
        logging.info("Solving %s", input_file)
        with open(input_file, 'r') as fin, open(output_file, 'w') as fout:
            solve_stream(fin, fout, heuristic, strict)
        done.append(output_file)
    return done


def run(argv=None):
    args = parseArg().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else LEVEL,
                        filename=args.log, filemode='w', format='%(message)s')
    heuristic = get_heuristic(args.heuristic, args.seed)

    try:
        if args.batch:
            done = run_batch(args.batch[0], args.batch[1], args.count, heuristic, args.strict)
            print("Solved {} test files, results are in {}".format(len(done), args.batch[1]))
        else:
            solve_stream(args.infile, sys.stdout, heuristic, args.strict, args.stats)
    except DimacsFormatError as e:
        logging.error("Malformed input: %s", e)
        print("error: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(run())
