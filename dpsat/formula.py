# cython: language_level=3
# cython: profile=False

from collections import defaultdict

from dpsat.exceptions import InvalidClauseError


def negate(l):
    return -l


class Clause(frozenset):
    """A disjunction of literals. Duplicates collapse, order is irrelevant."""

    @classmethod
    def from_ns(cls, ns):
        """ns - a list of integers representing literals"""
        ls = list(ns)
        if 0 in ls:
            raise InvalidClauseError("literal 0 is reserved as terminator", ls)
        return cls(ls)

    @property
    def singleton(self):
        return len(self) == 1

    @property
    def empty(self):
        return len(self) == 0

    @property
    def trivial(self):
        """True if the clause holds some literal together with its negation"""
        seen = set()
        for l in self:
            if -l in seen:
                return True
            seen.add(l)
        return False

    def get_only(self):
        assert(len(self) == 1)
        return next(iter(self))

    def xs(self):
        return {abs(l) for l in self}

    def has_var(self, x):
        return x in self or -x in self

    def without(self, ls):
        return Clause(l for l in self if l not in ls)

    def resolve(self, other, on):
        """Resolvent of self and other on atom `on`; both polarities of `on` are dropped"""
        return Clause(l for l in self.union(other) if abs(l) != on)

    def __str__(self):
        return "[ " + "".join("{} ".format(l) for l in sorted(self, key=_display_key)) + "]"

    def __repr__(self):
        return "Clause({})".format(sorted(self, key=_display_key))


def _display_key(l):
    return (abs(l), l)


class Formula:
    """
    A set of clauses with a literal index.

    The index maps every literal to the clauses that contain it, and a
    literal is kept in it only while some clause contains it. The index
    doubles as the literal registry: both polarities of an atom are tracked
    separately, so asking whether a literal is pure is a dictionary lookup.
    """

    def __init__(self, clauses=()):
        self.clauses = set()
        self.index = defaultdict(set)
        for c in clauses:
            self.add(c)

    def add(self, c):
        """Insert clause c; return False if an equal clause was already present"""
        if not isinstance(c, Clause):
            c = Clause.from_ns(c)
        if c in self.clauses:
            return False
        self.clauses.add(c)
        for l in c:
            self.index[l].add(c)
        return True

    def discard(self, c):
        """Remove clause c; return False if it was not present"""
        if c not in self.clauses:
            return False
        self.clauses.remove(c)
        for l in c:
            holders = self.index[l]
            holders.discard(c)
            if not holders:
                del self.index[l]
        return True

    def clauses_containing(self, l):
        """Snapshot of the clauses containing literal l; safe to mutate the formula meanwhile"""
        if l not in self.index:
            return ()
        return tuple(self.index[l])

    @property
    def literals(self):
        return self.index.keys()

    def has_literal(self, l):
        return l in self.index

    def atoms(self):
        return {abs(l) for l in self.index}

    def occurrences(self, x):
        """Number of occurrences of atom x, in either polarity"""
        return len(self.index.get(x, ())) + len(self.index.get(-x, ()))

    def has_empty_clause(self):
        return Clause() in self.clauses

    def copy(self):
        return Formula(self.clauses)

    def __len__(self):
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def __contains__(self, c):
        return c in self.clauses

    def __eq__(self, other):
        if isinstance(other, Formula):
            return self.clauses == other.clauses
        return NotImplemented

    def __str__(self):
        return "".join(str(c) for c in sorted(self.clauses, key=lambda c: (len(c), sorted(c, key=_display_key))))

    def __repr__(self):
        return "Formula({})".format(str(self))
