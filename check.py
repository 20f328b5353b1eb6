import logging

import numpy as np

logger = logging.getLogger(__name__)


def check(res, num_vars, sentence):
    """Check that `res` assigns every variable 1..num_vars exactly and satisfies every clause."""
    flag = True
    assigned = np.zeros(num_vars + 1, dtype=bool)
    assigned[0] = True
    for var in res:
        if var < 1 or var > num_vars:
            logger.warning("assignment for unknown variable %s", var)
            flag = False
            continue
        assigned[var] = True
    for var in np.flatnonzero(~assigned):
        logger.warning("variable %d is unassigned", var)
        flag = False

    for clause in sentence:
        if not any(res.get(abs(literal)) == (literal > 0) for literal in clause):
            logger.warning("clause %s is violated", list(clause))
            flag = False
    if flag:
        logger.debug("pass check!")
    return flag
