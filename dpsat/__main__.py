import sys

from dpsat.sat_solver import run

sys.exit(run())
