"""Davis-Putnam satisfiability checking for CNF formulas."""

from dpsat.formula import Clause, Formula
from dpsat.dp import DP, solve
from dpsat.exceptions import DimacsFormatError

__version__ = "0.1.0"
