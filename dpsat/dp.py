# cython: language_level=3
# cython: profile=False

import logging
from collections import Counter

from dpsat.branching import MaxOccurrence
from dpsat.exceptions import Conflict
from dpsat.formula import Clause, Formula

logger = logging.getLogger(__name__)

# driver states
SIMPLIFYING = "simplifying"
ELIMINATING = "eliminating"
SAT = "sat"
UNSAT = "unsat"

# outcomes of eliminating one atom
SKIPPED = "skipped"
ELIMINATED = "eliminated"
RESTART = "restart"


def INFO(depth, msg):
    logger.info('  ' * max(0, depth) + str(msg))

def DEBUG(depth, msg):
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug('  ' * max(0, depth) + str(msg).replace('\n', '\n' + '  ' * depth))


class Session:
    """State of one solve call: the working formula and the literals forced false so far"""

    def __init__(self, f):
        self.f = f
        self.false_literals = set()
        self.stats = Counter()

    def force_true(self, l):
        """Record that l must hold, i.e. -l is false. Return False if that was already known"""
        if l in self.false_literals:
            raise Conflict("atom {} forced both ways".format(abs(l)), Clause([l]))
        if -l in self.false_literals:
            return False
        self.false_literals.add(-l)
        return True

    def progress(self, stage):
        INFO(1, "{}: {} literals, {} clauses".format(stage, len(self.f.literals), len(self.f)))
        DEBUG(2, self.f)


def remove_tautologies(s):
    for c in [c for c in s.f if c.trivial]:
        s.f.discard(c)
        s.stats['tautologies'] += 1


def propagate_units(s):
    """
    Unit propagation to a fixed point.

    Every unit clause is removed and its literal's negation is forced
    false; forced-false literals are then deleted from every clause. A
    clause left empty is a conflict, a clause left with one literal is
    picked up by the next round.
    """
    f = s.f
    while True:
        units = [c for c in f if c.singleton]
        for c in units:
            f.discard(c)
            s.force_true(c.get_only())
            s.stats['unit_props'] += 1

        rewritten = False
        for l in list(s.false_literals):
            for c in f.clauses_containing(l):
                f.discard(c)
                reduced = c.without(s.false_literals)
                if reduced.empty:
                    raise Conflict("clause {} falsified".format(c), c)
                f.add(reduced)
                rewritten = True

        if not units and not rewritten:
            return


def remove_pure_clauses(s):
    """Drop every clause holding a pure literal, until no pure literal is left"""
    f = s.f
    while True:
        pures = [l for l in f.literals if not f.has_literal(-l)]
        if not pures:
            return
        for l in pures:
            if not f.has_literal(l):
                continue
            for c in f.clauses_containing(l):
                f.discard(c)
            s.stats['pure_literals'] += 1


def simplify(s):
    remove_tautologies(s)
    s.progress("after tautology removal")
    propagate_units(s)
    s.progress("after unit propagation")
    remove_pure_clauses(s)
    s.progress("after pure literal removal")


def eliminate(s, x):
    """
    Eliminate atom x by resolution.

    Return SKIPPED if x does not occur in both polarities, RESTART if a unit
    resolvent forced a new literal (the formula then needs simplifying before
    any further resolution), ELIMINATED otherwise.
    """
    f = s.f
    with_x = f.clauses_containing(x)
    without_x = f.clauses_containing(-x)
    if not with_x or not without_x:
        return SKIPPED

    s.stats['eliminations'] += 1
    for c1 in with_x:
        for c2 in without_x:
            s.stats['resolution_steps'] += 1
            r = c1.resolve(c2, x)
            if r.empty:
                raise Conflict("empty resolvent on {}".format(x), r)
            if r.singleton:
                if s.force_true(r.get_only()):
                    s.stats['restarts'] += 1
                    DEBUG(2, "unit resolvent {} on {}".format(r, x))
                    return RESTART
                continue
            if not r.trivial:
                f.add(r)

    for c in with_x + without_x:
        f.discard(c)
    s.false_literals.discard(x)
    s.false_literals.discard(-x)
    return ELIMINATED


class DP:
    """
    Davis-Putnam decision procedure.

    Alternates simplification and variable elimination until the formula is
    empty (SAT) or holds an empty clause (UNSAT). The heuristic only picks
    the order in which atoms are eliminated.
    """

    def __init__(self, heuristic=None):
        self.heuristic = heuristic if heuristic is not None else MaxOccurrence()
        self.stats = Counter()

    def solve(self, f):
        """Return True if f is satisfiable. f itself is left untouched"""
        f = f.copy() if isinstance(f, Formula) else Formula(f)
        s = Session(f)
        INFO(0, "Before simplification: {} literals, {} clauses".format(len(f.literals), len(f)))
        try:
            sat = self.run(s)
        except Conflict as e:
            INFO(0, "Conflict: {}".format(e))
            sat = False
        self.stats = s.stats

        stats = ["Statistics"]
        stats.extend("{}: {}".format(k, v) for k, v in sorted(s.stats.items()))
        INFO(0, "\n".join(stats))
        return sat

    def run(self, s):
        state = SIMPLIFYING
        while True:
            if state == SIMPLIFYING:
                simplify(s)
                state = self.classify(s.f)
            elif state == ELIMINATING:
                state = self.eliminate_all(s)
            else:
                INFO(0, "Verdict: {}".format(state))
                return state == SAT

    def classify(self, f):
        if len(f) == 0:
            return SAT
        if f.has_empty_clause():
            return UNSAT
        return ELIMINATING

    def eliminate_all(self, s):
        """One pass over the heuristic's order, eliminating every atom that can be"""
        s.stats['passes'] += 1
        found = False
        for x in self.heuristic.order(s.f):
            outcome = eliminate(s, x)
            if outcome == RESTART:
                return SIMPLIFYING
            if outcome == ELIMINATED:
                found = True
                s.progress("after resolving on {}".format(x))
        INFO(0, "#" * 29)

        # nothing left to resolve on
        if not found:
            return SAT
        return SIMPLIFYING


def solve(f, heuristic=None):
    return DP(heuristic).solve(f)
