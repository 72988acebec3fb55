"""
Tests for the DP driver: fixed scenarios and agreement with a brute-force
oracle on seeded random formulas.
"""

import unittest
import os
import random
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from dpsat.branching import MaxOccurrence, RandomOrder
from dpsat.dimacs import loads
from dpsat.dp import DP, solve
from dpsat.formula import Clause, Formula
from oracle import brute_force, random_clauses


def pigeonhole(pigeons, holes):
    p = lambda i, j: i * holes + j + 1
    clauses = [[p(i, j) for j in range(holes)] for i in range(pigeons)]
    for j in range(holes):
        for i in range(pigeons):
            for k in range(i + 1, pigeons):
                clauses.append([-p(i, j), -p(k, j)])
    return clauses


class TestScenarios(unittest.TestCase):
    """The reference inputs, under both heuristics."""

    def setUp(self):
        self.solvers = [DP(), DP(MaxOccurrence()), DP(RandomOrder(seed=5))]

    def check(self, text, expected):
        f = loads(text).formula
        for solver in self.solvers:
            self.assertEqual(solver.solve(f), expected, repr(solver.heuristic))

    def test_three_clauses_satisfiable(self):
        self.check("p cnf 3 3\n-1 -2 3 0\n-1 2 0\n1 -3 0\n", True)

    def test_complementary_units(self):
        self.check("p cnf 1 2\n1 0\n-1 0\n", False)

    def test_tautology_only(self):
        self.check("p cnf 1 1\n1 -1 0\n", True)

    def test_no_clauses(self):
        self.check("p cnf 0 0\n", True)

    def test_empty_clause_is_unsatisfiable(self):
        self.check("p cnf 1 1\n0\n", False)
        self.check("p cnf 2 2\n0\n1 2 0\n", False)

    def test_pigeonhole(self):
        self.assertFalse(solve(pigeonhole(3, 2)))
        self.assertFalse(solve(pigeonhole(4, 3)))
        self.assertTrue(solve(pigeonhole(3, 3)))


class TestDriver(unittest.TestCase):

    def test_input_formula_untouched(self):
        f = Formula([[1, 2], [-1, 2], [-2, 3]])
        before = f.copy()
        DP().solve(f)
        self.assertEqual(f, before)

    def test_accepts_plain_clause_lists(self):
        self.assertTrue(solve([[1, 2], [-1]]))
        self.assertFalse(solve([[1, 2], [-1], [-2]]))

    def test_stats(self):
        solver = DP()
        solver.solve([[1, 2, 3], [-1, 2], [-2, 3], [-3, 1], [-1, -2, -3]])
        self.assertGreater(solver.stats['passes'], 0)
        self.assertGreater(solver.stats['resolution_steps'], 0)

    def test_solver_is_reusable(self):
        solver = DP()
        self.assertFalse(solver.solve([[1], [-1]]))
        self.assertTrue(solver.solve([[1], [2]]))


class TestAgainstOracle(unittest.TestCase):

    def test_max_occurrence(self):
        rng = random.Random(101)
        solver = DP(MaxOccurrence())
        for _ in range(300):
            clauses = random_clauses(rng, n_vars=6, max_clauses=14)
            self.assertEqual(solver.solve(clauses), brute_force(clauses), clauses)

    def test_random_order(self):
        rng = random.Random(102)
        solver = DP(RandomOrder(seed=102))
        for _ in range(300):
            clauses = random_clauses(rng, n_vars=6, max_clauses=14)
            self.assertEqual(solver.solve(clauses), brute_force(clauses), clauses)

    def test_shuffle_invariance(self):
        """Clause and literal order, and the elimination order, never change the verdict."""
        rng = random.Random(103)
        for _ in range(100):
            clauses = random_clauses(rng, n_vars=5, max_clauses=12)
            expected = DP().solve(clauses)
            for seed in range(3):
                shuffled = [rng.sample(c, len(c)) for c in clauses]
                rng.shuffle(shuffled)
                self.assertEqual(DP(RandomOrder(seed=seed)).solve(shuffled), expected, clauses)

    def test_wider_clauses(self):
        rng = random.Random(104)
        for _ in range(100):
            clauses = random_clauses(rng, n_vars=7, max_clauses=20, max_width=4)
            self.assertEqual(solve(clauses), brute_force(clauses), clauses)

    def test_empty_clause_among_others(self):
        rng = random.Random(105)
        for _ in range(20):
            clauses = random_clauses(rng) + [[]]
            self.assertFalse(solve(Formula(clauses)))
        self.assertFalse(solve(Formula([Clause(), Clause([1])])))


if __name__ == "__main__":
    unittest.main()
