# cython: language_level=3

from random import Random


class MaxOccurrence:
    """Visit atoms by descending occurrence count; ties go to the larger atom"""

    name = "max"

    def order(self, f):
        return sorted(f.atoms(), key=lambda x: (f.occurrences(x), x), reverse=True)

    def __repr__(self):
        return "MaxOccurrence()"


class RandomOrder:
    """
    Visit atoms in a uniformly shuffled order.

    Without a seed every call draws a fresh generator from OS entropy. With a
    seed, one generator is kept so a sequence of calls is reproducible.
    """

    name = "random"

    def __init__(self, seed=None):
        self.seed = seed
        self.rng = Random(seed) if seed is not None else None

    def order(self, f):
        rng = self.rng if self.rng is not None else Random()
        xs = sorted(f.atoms())
        rng.shuffle(xs)
        return xs

    def __repr__(self):
        return "RandomOrder(seed={})".format(self.seed)


HEURISTICS = {
    MaxOccurrence.name: MaxOccurrence,
    RandomOrder.name: RandomOrder,
}


def get_heuristic(name, seed=None):
    if name not in HEURISTICS:
        raise ValueError("unknown heuristic {!r}, expected one of {}".format(name, ", ".join(sorted(HEURISTICS))))
    if name == RandomOrder.name:
        return RandomOrder(seed)
    return HEURISTICS[name]()
