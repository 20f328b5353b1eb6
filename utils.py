import logging

from exceptions import InvalidLiteral, MalformedInput
from two_sat import TwoSATProblem

logger = logging.getLogger(__name__)


def _tokens(f, header):
    """Yield (line_number, token) for clause tokens, filling `header` from the preamble."""
    for line_number, line in enumerate(f, start=1):
        line = line.strip()
        if not line or line.startswith("c"):
            continue
        if line.startswith("p"):
            spls = line.split()
            if len(spls) != 4 or spls[1] != "cnf":
                raise MalformedInput(f"Unrecognized preamble: {line}", line_number)
            try:
                header["num_vars"], header["num_clauses"] = int(spls[2]), int(spls[3])
            except ValueError:
                raise MalformedInput(f"Unrecognized preamble: {line}", line_number) from None
            continue
        for token in line.split():
            yield line_number, token


def read_cnf(f, header=None):
    """Read a 2-CNF file of `a b 0` clauses.

    Returns (sentence, num_vars) where `sentence` is a list of [a, b] clauses and
    `num_vars` is the largest variable seen. The `p cnf` counts, when present,
    only land in `header`.
    """
    if header is None:
        header = {}
    sentence = []
    clause = []
    num_vars = 0
    line_number = 0

    for line_number, token in _tokens(f, header):
        try:
            lit = int(token)
        except ValueError:
            raise MalformedInput(f"Not an integer: {token!r}", line_number) from None

        if len(clause) < 2:
            clause.append(lit)
            continue
        # Make sure the clause is over!
        if lit != 0:
            raise MalformedInput("Clause is too long or unterminated", line_number)
        sentence.append(clause)
        num_vars = max([num_vars] + [abs(l) for l in clause])
        clause = []

    if clause:
        raise MalformedInput("Clause is too long or unterminated", line_number)

    return sentence, num_vars


def read_problem(f):
    """Build a TwoSATProblem from a CNF file."""
    header = {}
    sentence, _ = read_cnf(f, header)

    problem = TwoSATProblem()
    for a, b in sentence:
        # a bad clause is dropped, the rest of the file still counts
        try:
            problem.insert_clause(a, b)
        except InvalidLiteral as e:
            logger.error("%s", e)

    # the preamble is informational only
    if header:
        logger.info("Number of variables in preamble: %d vs seen: %d", header["num_vars"], problem.num_vars)
        logger.info("Number of clauses in preamble: %d vs seen: %d",
                    header["num_clauses"], problem.num_implications // 2)
    return problem
