"""
Exceptions raised while building and reading 2-SAT problems.

Only input problems are reported this way. A missing vertex during SCC
traversal is a bug in the graph builder and is left to surface as KeyError.
"""


class TwoSATError(Exception):
    """Base exception class for the 2-SAT solver."""
    def __init__(self, message="2-SAT error"):
        self.message = message
        super().__init__(self.message)


class InvalidLiteral(TwoSATError):
    """
    Raised when a clause half is not a usable literal.

    Literal 0 terminates clauses in CNF files and is never a vertex. The
    clause is rejected before the graph is touched.
    """
    def __init__(self, message="Cannot insert 0 into the implication graph", clause=None):
        self.clause = clause
        if clause is not None:
            message = f"{message}: {tuple(clause)}"
        super().__init__(message)


class MalformedInput(TwoSATError):
    """Raised when a CNF file cannot be tokenized as 2-literal clauses."""
    def __init__(self, message="Malformed cnf file", line_number=None):
        self.line_number = line_number
        super().__init__(message)

    def __str__(self):
        if self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message
