"""
Reader and writer for DIMACS CNF.

    c comment
    p cnf <atoms> <clauses>
    1 -2 0
    2 3
    -1 0

Clauses are whitespace separated literals terminated by 0 and may span
lines. Lines starting with `c` are skipped anywhere; a line starting with
`%` ends the clause section.
"""

import io

from dpsat.exceptions import DimacsFormatError
from dpsat.formula import Clause, Formula


class SATProblem:
    def __init__(self, n_vars, n_clauses, formula):
        self.n_vars = n_vars
        self.n_clauses = n_clauses
        self.formula = formula

    def __str__(self):
        return dumps(self.formula, self.n_vars)


def _lines(stream):
    for n, line in enumerate(stream, 1):
        line = line.strip()
        if not line or line[0] == 'c':
            continue
        yield n, line


def _problem_line(n, line, strict):
    fields = line.split()
    if len(fields) != 4 or fields[0] != 'p':
        raise DimacsFormatError("malformed problem line {!r}".format(line), n)
    if strict and fields[1] != 'cnf':
        raise DimacsFormatError("unsupported format {!r}".format(fields[1]), n)
    try:
        n_vars, n_clauses = int(fields[2]), int(fields[3])
    except ValueError:
        raise DimacsFormatError("problem line counts must be integers: {!r}".format(line), n) from None
    if n_vars < 0 or n_clauses < 0:
        raise DimacsFormatError("problem line counts must not be negative: {!r}".format(line), n)
    return n_vars, n_clauses


def parse(stream, strict=False):
    """
    Read a CNF problem from an iterable of text lines.

    Lenient mode reads exactly the announced number of clauses and ignores
    whatever follows; the format token and the atom count are not checked.
    A clause with no literals before its 0 is kept as the empty clause.
    Strict mode rejects empty clauses, atoms above the announced count,
    a format other than `cnf` and clause data after the last clause.
    """
    lines = _lines(stream)
    n_vars = n_clauses = None
    for n, line in lines:
        if line[0] == 'p':
            n_vars, n_clauses = _problem_line(n, line, strict)
            break
        if strict:
            raise DimacsFormatError("clause data before the problem line", n)
    if n_clauses is None:
        raise DimacsFormatError("missing problem line")

    f = Formula()
    ls = []
    count = 0
    last = n
    for n, line in lines:
        last = n
        if line[0] == '%':
            break
        for token in line.split():
            if count == n_clauses:
                if strict:
                    raise DimacsFormatError("clause data after the last clause", n)
                break
            try:
                l = int(token)
            except ValueError:
                raise DimacsFormatError("expected an integer literal, got {!r}".format(token), n) from None
            if l == 0:
                if strict and not ls:
                    raise DimacsFormatError("empty clause", n)
                f.add(Clause(ls))
                ls = []
                count += 1
            else:
                if strict and abs(l) > n_vars:
                    raise DimacsFormatError("atom {} exceeds declared count {}".format(abs(l), n_vars), n)
                ls.append(l)
        if count == n_clauses and not strict:
            break

    if count < n_clauses:
        msg = "expected {} clauses, found {}".format(n_clauses, count)
        if ls:
            msg += " and an unterminated clause"
        raise DimacsFormatError(msg, last)
    return SATProblem(n_vars, n_clauses, f)


def loads(text, strict=False):
    return parse(io.StringIO(text), strict)


def load(path, strict=False):
    with open(path, 'r') as f:
        return parse(f, strict)


def dumps(f, n_vars=None):
    """DIMACS text for formula f"""
    if n_vars is None:
        n_vars = max(f.atoms(), default=0)
    cs = sorted(f, key=lambda c: (len(c), sorted(c, key=abs)))
    meta = "p cnf {} {}".format(n_vars, len(cs))
    return "\n".join([meta] + ["".join("{} ".format(l) for l in sorted(c, key=lambda l: (abs(l), l))) + "0" for c in cs]) + "\n"
