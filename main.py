import argparse
import logging
import sys
import time

from check import check
from exceptions import TwoSATError
from utils import read_problem

logger = logging.getLogger("two_sat")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2-SAT solver based on strongly connected components")
    parser.add_argument("-i", "--input", type=str, default="examples/and1.cnf")
    parser.add_argument("-v", "--verbose", action="store_true")  # dump graph and components
    parser.add_argument("--no-check", dest="check", action="store_false")
    return parser.parse_args(argv)


def format_assignment(res):
    return " ".join("1" if res[var] else "0" for var in sorted(res))


def main(args):
    # Create problem.
    try:
        with open(args.input, "r") as f:
            problem = read_problem(f)
    except FileNotFoundError:
        logger.error("File not found: %s", args.input)
        return 1
    except TwoSATError as e:
        logger.error("Parse failed: %s", e)
        return 1

    start = time.time()
    sccs = problem.solve()
    logger.debug("Implication graph: %s", problem.digraph)
    logger.debug("Strongly connected components: %s", sccs)

    res = problem.find_solution()
    end = time.time()

    if res is None:
        print("FORMULA UNSATISFIABLE")
    else:
        print("FORMULA SATISFIABLE")
        print(format_assignment(res))
        if args.check and not check(res, problem.num_vars, problem.clauses):
            logger.error("assignment does not satisfy the formula")
            return 1
    logger.info("Total time: %.4fs", end - start)
    return 0


def cli(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
