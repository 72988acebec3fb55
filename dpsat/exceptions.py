"""
Exception classes for the DP solver.

A logical conflict is an expected outcome, not a failure; it is raised
only to unwind the current round and is turned into an UNSAT verdict by
the driver. Malformed input is a real error and reaches the caller.
"""


class SATBaseException(Exception):
    """Base exception class for all solver related exceptions."""
    pass


class Conflict(SATBaseException):
    """
    Raised when an empty clause is derived.

    Used for control flow only; DP.solve never lets it escape.
    """
    def __init__(self, message="Empty clause derived", clause=None):
        self.clause = clause
        self.message = message
        super().__init__(self.message)


class InvalidClauseError(SATBaseException, ValueError):
    """
    Raised when a clause is built from an invalid literal (the terminator 0).
    """
    def __init__(self, message="Invalid clause detected", clause=None):
        self.clause = clause
        self.message = message
        if clause is not None:
            self.message = f"{message}: {clause}"
        super().__init__(self.message)


class DimacsFormatError(SATBaseException):
    """
    Raised when DIMACS input is structurally malformed.

    Attributes:
        line: 1-based line number where the problem was found, if known
    """
    def __init__(self, message="Malformed DIMACS input", line=None):
        self.line = line
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message
